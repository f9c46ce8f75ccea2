"""
AI summaries of corpus documents through a Gemini chat model
"""

import logging
from typing import Any, Optional

from langchain_core.prompts import PromptTemplate
from langchain_google_genai import ChatGoogleGenerativeAI

from ..config import settings

logger = logging.getLogger(__name__)


FALLBACK_SUMMARY = "AI processing unavailable - check your API key"


class Summarizer:
    """Answers a query about one document, or summarizes it when there is no query"""

    def __init__(self, llm: Any = None, model: Optional[str] = None,
                 api_key: Optional[str] = None, char_budget: Optional[int] = None):
        self.model = model or settings.LLM_MODEL
        self.api_key = api_key or settings.GOOGLE_API_KEY
        self.char_budget = char_budget or settings.SUMMARY_CHAR_BUDGET
        self._llm = llm

        self.query_prompt = PromptTemplate(
            input_variables=["query", "text"],
            template='Based on this city council document, answer the query: "{query}"\n\nDocument content: {text}'
        )
        self.summary_prompt = PromptTemplate(
            input_variables=["text"],
            template=(
                "Summarize this city council document in 2-3 sentences, "
                "focusing on key decisions and actions:\n\n{text}"
            )
        )

    @property
    def llm(self):
        """Chat model, created on first use"""
        if self._llm is None:
            if not self.api_key:
                raise RuntimeError("GOOGLE_API_KEY is not set")
            self._llm = ChatGoogleGenerativeAI(
                model=self.model,
                google_api_key=self.api_key,
                temperature=settings.LLM_TEMPERATURE,
                max_output_tokens=settings.LLM_MAX_OUTPUT_TOKENS
            )
        return self._llm

    def build_prompt(self, text: str, query: Optional[str] = None) -> str:
        text = (text or '')[:self.char_budget]
        if query:
            return self.query_prompt.format(query=query, text=text)
        return self.summary_prompt.format(text=text)

    def summarize(self, text: str, query: Optional[str] = None) -> str:
        """Return the model's answer, or the fixed fallback on any failure"""
        try:
            response = self.llm.invoke(self.build_prompt(text, query))
            answer = getattr(response, 'content', response)
            if not isinstance(answer, str) or not answer.strip():
                raise ValueError("empty response from chat model")
            return answer.strip()
        except Exception as e:
            logger.error(f"AI processing error: {e}")
            return FALLBACK_SUMMARY
