"""
The CONTROLLER layer drives the curve model: it generates populations,
reports on them and reduces them.
"""
