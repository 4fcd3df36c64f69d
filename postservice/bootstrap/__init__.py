"""Composition root.

Turns a ServiceConfig into a running object graph: database engine and
session factory, repositories, probes, services, metrics and logging.
Only this package and the API entry point know which adapters are in use.
"""
