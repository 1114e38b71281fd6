"""
Task subsystem.

Components:
- task_models.py: data structures (ToDo, Deadline, Event) + rendering/snapshot helpers
- task_store.py: text log + JSON snapshot storage
- task_list.py: ordered in-memory list that saves after every mutation
"""
