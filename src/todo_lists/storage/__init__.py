"""
Persistence adapters.

- json_store.py: JsonSnapshotStore, versioned snapshot in a local JSON file
"""
