"""Services Layer — task use cases between routes and the repository.

Invariants:
    - Services receive a TaskRepository (Protocol), never an AsyncSession
    - Services raise TaskApiError subclasses; routes never build error bodies
"""
