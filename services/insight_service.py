# services/insight_service.py
import logging
from typing import Any, Dict, List, Optional

import google.generativeai as genai

from core.config import gemini_api_key, gemini_model_name

logger = logging.getLogger(__name__)

FALLBACK_INSIGHT = "Mantenha a disciplina para alcançar suas metas."
EMPTY_INSIGHT = "Continue focado em seus objetivos!"


def build_prompt(tasks: List[Dict[str, Any]]) -> str:
    completed = sum(1 for t in tasks if t.get("completed"))
    task_lines = "\n".join(
        f"- {t.get('title', '')} ({'Concluída' if t.get('completed') else 'Pendente'})" for t in tasks
    )
    return (
        "Analise a produtividade do usuário com base nestas tarefas de hoje:\n"
        f"Total: {len(tasks)}\n"
        f"Concluídas: {completed}\n\n"
        f"Lista de tarefas:\n{task_lines}\n\n"
        "Dê um conselho curto, profissional e motivador (máximo 2 frases) em português "
        "sobre como ele pode melhorar ou elogie o bom desempenho."
    )


def _default_model():
    genai.configure(api_key=gemini_api_key())
    return genai.GenerativeModel(gemini_model_name())


def get_productivity_insight(tasks: List[Dict[str, Any]], model: Optional[Any] = None) -> str:
    """Short advice for the given tasks; never raises, no retries."""
    try:
        model = model or _default_model()
        response = model.generate_content(
            build_prompt(tasks),
            generation_config={"temperature": 0.7, "top_p": 0.9},
        )
    except Exception as e:
        logger.warning("AI insight generation failed: %s", e)
        return FALLBACK_INSIGHT
    try:
        text = (response.text or "").strip()
    except ValueError as e:
        # blocked or empty candidates: the model answered with nothing usable
        logger.info("AI insight returned no text: %s", e)
        text = ""
    return text or EMPTY_INSIGHT
