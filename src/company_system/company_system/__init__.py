"""Company System package.

Departments, employees, projects and their assignments, organized by feature
module with a thin Flask controller layer. Mutations go through the constraint
validator inside one unit of work; reports are computed from a read-only snapshot.
"""
