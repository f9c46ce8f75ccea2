#!/usr/bin/env python3
"""
Tests for AI summaries with a mocked chat model
"""

from unittest.mock import Mock

import pytest

from newsroom.config import settings
from newsroom.rag.summarizer import FALLBACK_SUMMARY, Summarizer


def make_llm(content="The council approved the budget."):
    llm = Mock()
    llm.invoke.return_value = Mock(content=content)
    return llm


@pytest.mark.unit
class TestSummarizer:
    """Test Summarizer"""

    def test_query_prompt(self):
        summarizer = Summarizer(llm=make_llm(), api_key="test-key")
        prompt = summarizer.build_prompt("Budget discussion.", "budget")
        assert prompt.startswith('Based on this city council document, answer the query: "budget"')
        assert prompt.endswith("Document content: Budget discussion.")

    def test_summary_prompt_without_query(self):
        summarizer = Summarizer(llm=make_llm(), api_key="test-key")
        prompt = summarizer.build_prompt("Budget discussion.")
        assert prompt.startswith("Summarize this city council document in 2-3 sentences")
        assert prompt.endswith("Budget discussion.")

    def test_text_truncated_to_budget(self):
        summarizer = Summarizer(llm=make_llm(), api_key="test-key", char_budget=4000)
        prompt = summarizer.build_prompt("a" * 5000 + "b" * 10)
        assert "a" * 4000 in prompt
        assert "a" * 4001 not in prompt
        assert "b" not in prompt.split("\n\n", 1)[1]

    def test_returns_model_answer(self):
        llm = make_llm("  The council approved the budget.  ")
        summarizer = Summarizer(llm=llm, api_key="test-key")

        assert summarizer.summarize("text", "budget") == "The council approved the budget."
        llm.invoke.assert_called_once()

    def test_fallback_on_model_error(self):
        llm = Mock()
        llm.invoke.side_effect = RuntimeError("quota exceeded")
        summarizer = Summarizer(llm=llm, api_key="test-key")

        assert summarizer.summarize("text", "budget") == FALLBACK_SUMMARY

    def test_fallback_on_empty_answer(self):
        summarizer = Summarizer(llm=make_llm("   "), api_key="test-key")
        assert summarizer.summarize("text") == FALLBACK_SUMMARY

    def test_fallback_without_api_key(self, monkeypatch):
        monkeypatch.setattr(settings, "GOOGLE_API_KEY", None)
        summarizer = Summarizer()

        assert summarizer.summarize("text", "budget") == FALLBACK_SUMMARY
        with pytest.raises(RuntimeError):
            summarizer.llm
