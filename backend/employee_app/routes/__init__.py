# Routes package init
"""
Employee App Backend: API Routes Package
===========================================

Route Inventory:
    - employees.py: POST   /employees          (create)
                    GET    /employees          (list)
                    DELETE /employees/{id}     (delete)
    - health.py:    GET    /health             (service health check)
    - frontend.py:  GET    /  and static files (pre-built frontend)

Routes stay thin: extract parameters, call EmployeeService, shape the response.
"""
