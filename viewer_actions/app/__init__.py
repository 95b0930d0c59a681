"""Application facade and UI-facing state.

- Single action entry: backend.dispatch(text) → ActionDispatcher
- UI binding via state QObjects (backend.viewer)
- Status line updates go through StatusReporter
"""
