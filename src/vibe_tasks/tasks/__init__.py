"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TimeEntry, Category, Priority, Status)
- task_store.py: JSON file storage for the whole collection
- category_catalog.py: the selectable categories (built-in or from a JSON file)
- task_render.py: plain-text list and time report views
- task_api.py: the task operations used by the CLI
"""
