"""Core orchestration package.

Composition:
    - `engine`: `Orchestrator`, the pipeline runner and UI state owner.
    - `result_types`: `AnalysisResult`, `ImageOutcome` and `ViewState` contracts.
    - `errors`: analysis failure taxonomy.
"""
