"""
Core of the app (no I/O).

Components:
- models.py: data structures (TodoList, Task, TodoState)
- state.py: pure state transitions
- views.py: derived views (active list, filtered and sorted tasks)
- snapshot.py: TodoState <-> persisted snapshot dict
- store.py: TodoStore, owns the state and drives persistence
- ports.py: Protocols for the injected collaborators
"""
