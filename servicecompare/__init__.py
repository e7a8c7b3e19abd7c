"""servicecompare package.

Layout:

- servicecompare/declarations  service.json + *.api models and loader
- servicecompare/checks        single-declaration validation rules
- servicecompare/compare       base-vs-custom diff engine
- servicecompare/generator     Generator.compare_services (the comparison entry point)
- servicecompare/task          task adapter resolving the two declaration paths
- servicecompare/config        property store (pyproject, properties file, env, -P)
"""

__version__ = "1.0.0"
