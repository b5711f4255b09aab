"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus, COLUMNS)
- task_repository.py: CRUD over the persisted task collection
"""
