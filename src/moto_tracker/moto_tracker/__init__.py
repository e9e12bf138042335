"""MotoTracker package.

Feature modules (holidays, attendance, stats, report) hold the domain logic;
a thin Flask controller layer sits on top of the service/repository layers.
"""
