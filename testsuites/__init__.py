"""
Test suites package.

Kept importable so `run_tests.py`, the unit tests and IDEs can reach the
framework modules as `testsuites.ui_testing...`.

Defaults target the public SauceDemo demo accounts; no real secrets live here.
"""
