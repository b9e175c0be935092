"""Event Registration package.

This package is organized by feature modules (registrations, accounts, ...)
on top of a generic record store and SOLID service/repository layers.
"""
