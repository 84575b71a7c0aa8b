"""
Task subsystem.

Components:
- task_models.py: the Task record and its field defaults
- task_store.py: JSON-file storage (load/save + add/list/remove, store deletion)
- errors.py: error kinds raised by the store
"""
