# Services package init
"""
Employee App Backend: Services Layer
=======================================

Service Inventory:
    - EmployeeService: create / list / delete over the employees table

Services receive the per-request AsyncSession as an argument and can be
unit-tested with a mocked session.
"""
