"""Opportunity extraction: client text -> {summary, priority, required_skills}.

One blocking round trip to an OpenAI-compatible chat completion endpoint per
call, followed by deterministic parsing, validation and skill-name
normalization against a caller-supplied snapshot of known skills.
"""
from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Iterable, Literal, Optional, Sequence

from pydantic import BaseModel, Field

from leadboard.config import Settings


logger = logging.getLogger(__name__)

PRIORITIES = ("Low", "Medium", "High")

Priority = Literal["Low", "Medium", "High"]


class ExtractionError(RuntimeError):
    """Base class for every extraction failure."""

    kind = "extraction_error"
    retryable = False


class InvalidInput(ExtractionError):
    kind = "invalid_input"


class ConfigurationError(ExtractionError):
    kind = "configuration_error"


class UpstreamServiceError(ExtractionError):
    kind = "upstream_service_error"
    retryable = True


class EmptyResponseError(ExtractionError):
    kind = "empty_response"
    retryable = True


class MalformedResponseError(ExtractionError):
    kind = "malformed_response"

    def __init__(self, message: str, raw_text: str) -> None:
        super().__init__(message)
        self.raw_text = raw_text


class SchemaValidationError(ExtractionError):
    kind = "schema_validation"

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field


class ExtractionResult(BaseModel):
    summary: str
    priority: Priority
    required_skills: list[str] = Field(default_factory=list)


@dataclass(frozen=True)
class ExtractorConfig:
    api_key: Optional[str]
    model: str = "gpt-4o-mini"
    max_tokens: int = 500
    temperature: float = 0.3
    timeout_seconds: float = 60.0
    base_url: Optional[str] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "ExtractorConfig":
        return cls(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            max_tokens=settings.openai_max_tokens,
            temperature=settings.openai_temperature,
            timeout_seconds=settings.openai_timeout_seconds,
            base_url=settings.openai_base_url,
        )


SYSTEM_PROMPT_TEMPLATE = """You are an expert assistant for analyzing client emails about technical projects.
Analyze the email content and extract structured information.

LANGUAGE REQUIREMENT:
- Respond in English ONLY, regardless of the language of the input email.
- The summary and every skill name must be in English.

REQUIREMENTS:
1. summary: a concise project summary in EXACTLY 1 sentence.
2. priority: exactly one of "Low", "Medium" or "High", decided from:
   - explicit urgency language and deadlines ("urgent", "asap", due dates)
   - the budget mentioned (a larger budget means a higher priority)
   - the stated importance of the client or project
   A harder deadline or a higher budget implies a higher priority.
3. required_skills: the technical skills needed for the work.{skills_block}
   - Otherwise use the name mentioned in the email.
   - Return an array of strings.

Respond ONLY with a valid JSON object with this exact structure:
{{
  "summary": "one sentence in English",
  "priority": "Low|Medium|High",
  "required_skills": ["skill1", "skill2"]
}}"""

USER_PROMPT_TEMPLATE = (
    "Analyze the following client email and extract the requested information. "
    "Respond in English only, regardless of the email language.\n\n{text}"
)

_LEADING_FENCE_RE = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_TRAILING_FENCE_RE = re.compile(r"\s*```\s*$")


def build_system_prompt(known_skills: Sequence[str]) -> str:
    skills_block = ""
    if known_skills:
        skills_block = (
            "\n   The available skills in our database are: "
            f"{', '.join(known_skills)}. Match these names when possible."
            "\n   - Prefer the exact or closest name from the available skills when plausible."
        )
    return SYSTEM_PROMPT_TEMPLATE.format(skills_block=skills_block)


def build_user_prompt(text: str) -> str:
    return USER_PROMPT_TEMPLATE.format(text=text)


def strip_code_fence(raw_text: str) -> str:
    """Remove one leading ```/```json fence and one trailing ``` fence."""
    text = raw_text.strip()
    if not text.startswith("```"):
        return text
    text = _LEADING_FENCE_RE.sub("", text, count=1)
    text = _TRAILING_FENCE_RE.sub("", text, count=1)
    return text.strip()


def normalize_skill_name(candidate: str, known_skills: Sequence[str]) -> str:
    trimmed = candidate.strip()
    needle = trimmed.lower()

    for known in known_skills:
        if known.lower() == needle:
            return known

    # Bidirectional containment, first match in list order wins.
    for known in known_skills:
        known_lower = known.lower()
        if needle in known_lower or known_lower in needle:
            return known

    return trimmed


def dedupe_preserving_order(values: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    ordered: list[str] = []
    for value in values:
        key = value.lower()
        if key in seen:
            continue
        seen.add(key)
        ordered.append(value)
    return ordered


def validate_payload(payload: Any) -> tuple[str, str, list[str]]:
    if not isinstance(payload, dict):
        raise SchemaValidationError("<root>", "expected a JSON object")

    summary = payload.get("summary")
    if not isinstance(summary, str) or not summary.strip():
        raise SchemaValidationError("summary", "must be a non-empty string")

    priority = payload.get("priority")
    if not isinstance(priority, str) or priority not in PRIORITIES:
        raise SchemaValidationError("priority", 'must be one of "Low", "Medium" or "High"')

    skills = payload.get("required_skills")
    if not isinstance(skills, list):
        raise SchemaValidationError("required_skills", "must be an array")
    if not all(isinstance(item, str) for item in skills):
        raise SchemaValidationError("required_skills", "must contain only strings")

    return summary.strip(), priority, skills


def parse_completion(raw_text: str, known_skills: Sequence[str]) -> ExtractionResult:
    """Turn the model's reply into an ExtractionResult. Pure and deterministic."""
    cleaned = strip_code_fence(raw_text)
    try:
        payload = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        logger.warning("ai.extract invalid_json error=%s raw=%s", exc, raw_text)
        raise MalformedResponseError(f"Completion is not valid JSON: {exc}", raw_text=raw_text) from exc

    summary, priority, skills = validate_payload(payload)
    normalized = [normalize_skill_name(skill, known_skills) for skill in skills if skill.strip()]
    return ExtractionResult(
        summary=summary,
        priority=priority,
        required_skills=dedupe_preserving_order(normalized),
    )


class OpportunityExtractor:
    """Single-shot extractor backed by an OpenAI chat completion client.

    `client` may be any object exposing ``chat.completions.create``; when
    omitted an ``openai.OpenAI`` client is created lazily on first use.
    """

    def __init__(self, config: ExtractorConfig, client: Any = None) -> None:
        self.config = config
        self._client = client

    def _get_client(self) -> Any:
        if self._client is None:
            from openai import OpenAI

            self._client = OpenAI(
                api_key=self.config.api_key,
                base_url=self.config.base_url,
                timeout=self.config.timeout_seconds,
                max_retries=0,
            )
        return self._client

    def extract(self, text: str, known_skills: Sequence[str]) -> ExtractionResult:
        if not text or not text.strip():
            raise InvalidInput("Email content cannot be empty")
        if not self.config.api_key or not self.config.api_key.strip():
            raise ConfigurationError("OPENAI_API_KEY is not configured")

        known = list(known_skills)
        raw_text = self._complete(build_system_prompt(known), build_user_prompt(text))
        logger.debug("ai.extract raw_response=%s", raw_text)
        return parse_completion(raw_text, known)

    def _complete(self, system_prompt: str, user_prompt: str) -> str:
        try:
            completion = self._get_client().chat.completions.create(
                model=self.config.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                response_format={"type": "json_object"},
                max_tokens=self.config.max_tokens,
                temperature=self.config.temperature,
                timeout=self.config.timeout_seconds,
            )
        except Exception as exc:  # noqa: BLE001 - every client failure is an upstream failure
            logger.warning("ai.extract upstream_error=%s: %s", type(exc).__name__, exc)
            raise UpstreamServiceError(f"Completion request failed: {exc}") from exc

        choices = getattr(completion, "choices", None) or []
        message = getattr(choices[0], "message", None) if choices else None
        content = getattr(message, "content", None)
        if not content or not content.strip():
            raise EmptyResponseError("Completion service returned an empty response")
        return content
