"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority, FilterMode, ValidationError)
- task_codec.py: JSON blob encoding/decoding of the task collection
- task_store.py: in-memory collection synchronized to blob storage
- task_views.py: filtered views and counts over the collection
"""
