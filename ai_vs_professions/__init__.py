"""AI vs Professions: replaceability verdicts and illustrations from Gemini."""
