"""Payroll System package.

Feature modules (attendance, employees, payroll) sit behind a thin Flask
controller layer; services hold the business rules and talk to storage
only through repository protocols.
"""
