"""
Core of the board.

Components:
- errors.py: error taxonomy (StoreUnavailable, ValidationError, TaskNotFound)
- ports.py: Protocols for the store, the repository and the renderer
- state.py: AppState + the BoardSession context
- workflow.py: the edit/add modal state machine
- controller.py: typed commands, dispatcher and command queue
"""
