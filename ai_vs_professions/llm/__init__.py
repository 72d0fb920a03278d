"""Language-model access package.

Architectural role:
    Provides provider configuration, the shared transport client and the
    profession-analysis adapter used by the orchestrator.

Module split:
    - `provider_config`: environment-driven model, endpoint and key configuration.
    - `client`: `GeminiClient`, the HTTP transport for `generateContent`.
    - `service`: prompt-to-`AnalysisResult` adapter with parsing and validation.
"""
