"""Prompt assembly for the replaceability analysis.

This module is intentionally narrow: it only builds the instruction string and the
declared response schema. Model invocation and response parsing happen in
`ai_vs_professions.llm.service`.

Design constraints:
    - Deterministic construction for identical inputs.
    - No hidden side effects (no I/O, no global state mutation).

Prompt safety model:
    The profession is interpolated as a raw string inside quotes. Output shape is
    enforced by the service-side `responseSchema`, and re-checked after parsing.
"""


# =========================================================
# ANALYSIS INSTRUCTION
# =========================================================
# Two tonal modes: a serious explanation plus a robot-at-work picture when the
# profession is replaceable, a humane explanation plus a funny failing-robot
# picture when it is not.

ANALYSIS_TEMPLATE = (
    'Проанализируй профессию: "{profession}".\n'
    "Может ли искусственный интеллект заменить эту профессию полностью или частично "
    "в ближайшем будущем?\n"
    "\n"
    "Если может (полностью или значительно):\n"
    "- replaceable: true\n"
    "- explanation: Объясни, как именно ИИ заменит эту работу.\n"
    "- imagePrompt: Описание картинки, показывающей робота или ИИ, выполняющего эту работу.\n"
    "\n"
    "Если не может (или это очень сложно):\n"
    "- replaceable: false\n"
    "- explanation: Объясни, почему ИИ сложно заменить эту работу "
    "(человеческий фактор, эмпатия, креативность и т.д.).\n"
    "- imagePrompt: Описание смешной картинки, где робот пытается выполнить эту работу, "
    "но у него не получается или он выглядит глупо.\n"
    "\n"
    "Ответь ТОЛЬКО в формате JSON."
)


# =========================================================
# RESPONSE SCHEMA
# =========================================================
# OpenAPI-subset schema accepted by Gemini `generationConfig.responseSchema`.

ANALYSIS_RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "replaceable": {"type": "BOOLEAN"},
        "explanation": {"type": "STRING"},
        "imagePrompt": {"type": "STRING"},
    },
    "required": ["replaceable", "explanation", "imagePrompt"],
}


def build_analysis_prompt(profession: str) -> str:
    """Interpolate the profession into the fixed analysis instruction.

    Edge cases:
        Surrounding whitespace is stripped; blank input is the caller's problem
        (the orchestrator never submits it).
    """
    return ANALYSIS_TEMPLATE.format(profession=profession.strip())


def build_analysis_payload(profession: str) -> dict:
    """Build the `generateContent` body for one analysis request."""
    return {
        "contents": [
            {
                "role": "user",
                "parts": [{"text": build_analysis_prompt(profession)}],
            }
        ],
        "generationConfig": {
            "responseMimeType": "application/json",
            "responseSchema": ANALYSIS_RESPONSE_SCHEMA,
        },
    }


def build_image_payload(prompt: str, aspect_ratio: str) -> dict:
    """Build the `generateContent` body for one illustration request."""
    return {
        "contents": [
            {
                "role": "user",
                "parts": [{"text": prompt}],
            }
        ],
        "generationConfig": {
            "imageConfig": {"aspectRatio": aspect_ratio},
        },
    }
