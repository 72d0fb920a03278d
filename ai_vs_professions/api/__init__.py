"""HTTP adapter package.

Architectural role:
- Serves the single-page frontend and the JSON/SSE endpoints.
- Delegates all pipeline work to `ai_vs_professions.core.engine.Orchestrator`.
"""
