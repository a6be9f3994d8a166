"""Core engine: element model, run control, steps, algorithms and driver.

Nothing in this package knows about the UI.  Rendering, sound and metrics are
collaborators handed to `StepDriver`.
"""
