"""Excuse generation: templated fallbacks blended with OpenAI completions."""

import logging
import math
import random
import time
from typing import Any

from openai import AsyncOpenAI
from pydantic import BaseModel, Field, ValidationInfo, field_validator

from quickexit.config import get_settings
from quickexit.domain.excuse import Category, ExcuseSource, GenerationResult, Tone
from quickexit.infrastructure.csv_logger import CSVLogger
from quickexit.services.fallbacks import get_fallback_pool

logger = logging.getLogger(__name__)
settings = get_settings()

MIN_BELIEVABILITY = 1
MAX_BELIEVABILITY = 10

CATEGORY_PROMPTS: dict[Category, str] = {
    Category.WORK: "a work-related emergency that requires immediate attention",
    Category.FAMILY: "a family emergency or urgent family matter",
    Category.HEALTH: "a health concern or medical issue",
    Category.TRANSPORT: "a transportation problem or vehicle issue",
}
DEFAULT_CATEGORY_PROMPT = "an emergency situation"

TONE_PROMPTS: dict[Tone, str] = {
    Tone.FRIENDLY: "polite, apologetic, and understanding tone",
    Tone.URGENT: "urgent and serious tone that conveys real emergency",
    Tone.SUBTLE: "casual and understated tone that doesn't draw attention",
}
DEFAULT_TONE_PROMPT = "polite"

SYSTEM_PROMPT = (
    "You are an expert at creating believable, helpful excuses for people who "
    "need to safely exit uncomfortable social situations. Your responses help "
    "people prioritize their safety and comfort."
)

EXCUSE_PROMPT = """Generate a believable excuse for leaving a social situation immediately.

Context: The person needs to leave because of {category_prompt}.
Tone: Use a {tone_prompt}.

Requirements:
- Keep it under 50 words
- Make it sound natural and conversational
- Include enough detail to be believable but not overly specific
- Suitable for texting or speaking aloud
- Should feel authentic and not rehearsed

Respond with JSON in this exact format:
{{
  "excuse": "the generated excuse text",
  "believability": number between 1-10 indicating how believable this excuse sounds
}}"""


def describe_category(category: str) -> str:
    """Expand a category key into prompt prose."""
    try:
        return CATEGORY_PROMPTS[Category(category)]
    except ValueError:
        return DEFAULT_CATEGORY_PROMPT


def describe_tone(tone: str) -> str:
    """Expand a tone key into prompt prose."""
    try:
        return TONE_PROMPTS[Tone(tone)]
    except ValueError:
        return DEFAULT_TONE_PROMPT


def build_excuse_prompt(category: str, tone: str) -> str:
    """Build the user prompt sent to the model."""
    return EXCUSE_PROMPT.format(
        category_prompt=describe_category(category),
        tone_prompt=describe_tone(tone),
    )


def clamp_believability(value: Any, default: int | None = None) -> int:
    """Coerce a reported believability score into the 1-10 range.

    Missing or non-numeric values (including booleans) become ``default``.
    """
    if default is None:
        default = settings.default_believability
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(number):
        return default
    if math.isinf(number):
        return MAX_BELIEVABILITY if number > 0 else MIN_BELIEVABILITY
    return max(MIN_BELIEVABILITY, min(MAX_BELIEVABILITY, round(number)))


class ExcuseOutput(BaseModel):
    """Structured reply expected from the model."""

    excuse: str = Field(min_length=1, description="The generated excuse text")
    believability: int = Field(
        default=None,
        validate_default=True,
        description="How believable the excuse sounds, 1-10",
    )

    @field_validator("excuse", mode="after")
    @classmethod
    def _strip_excuse(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("excuse must not be blank")
        return value

    @field_validator("believability", mode="before")
    @classmethod
    def _normalize_believability(cls, value: Any, info: ValidationInfo) -> int:
        default = (info.context or {}).get("default_believability")
        return clamp_believability(value, default)


class ExcuseGenerator:
    """Produces excuses from a curated pool, occasionally from OpenAI."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        client: AsyncOpenAI | None = None,
        rng: random.Random | None = None,
        ai_probability: float | None = None,
        believability_range: tuple[int, int] | None = None,
        default_believability: int | None = None,
        temperature: float | None = None,
        timeout: float | None = None,
        metrics: CSVLogger | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            api_key: OpenAI key; empty disables the AI path. Defaults to settings.
            model: Chat model name. Defaults to settings.
            client: Pre-built OpenAI client, mainly for tests.
            rng: Source of randomness for the gate, pool pick and scores.
            ai_probability: Chance of attempting the AI path when a key is set.
            believability_range: Inclusive score range for fallback excuses.
            default_believability: Score used when the model reports none.
            temperature: Sampling temperature for completions.
            timeout: Seconds before an OpenAI request is abandoned.
            metrics: Optional CSV sink for per-call timings.
        """
        self.api_key = settings.openai_api_key if api_key is None else api_key
        self.model = model or settings.excuse_model
        self.rng = rng or random.Random()
        self.ai_probability = (
            settings.ai_probability if ai_probability is None else ai_probability
        )
        self.believability_range = believability_range or (
            settings.fallback_believability_min,
            settings.fallback_believability_max,
        )
        self.default_believability = (
            settings.default_believability
            if default_believability is None
            else default_believability
        )
        self.temperature = settings.excuse_temperature if temperature is None else temperature
        self.timeout = settings.openai_timeout_seconds if timeout is None else timeout
        self.metrics = metrics

        if client is None and self.api_key:
            client = AsyncOpenAI(
                api_key=self.api_key,
                timeout=self.timeout,
                max_retries=0,
            )
        self.client = client

    @property
    def provider_available(self) -> bool:
        """Whether the AI path can be attempted at all."""
        return bool(self.api_key) and self.client is not None

    def _fallback(self, excuse: str) -> GenerationResult:
        low, high = self.believability_range
        return GenerationResult(
            excuse=excuse,
            believability=self.rng.randint(low, high),
            source=ExcuseSource.FALLBACK,
        )

    def _should_use_ai(self) -> bool:
        if not self.provider_available:
            logger.debug("OpenAI API key not configured, using fallback excuse")
            return False
        return self.rng.random() < self.ai_probability

    async def generate(self, category: str, tone: str) -> GenerationResult:
        """Generate an excuse. Never raises; degrades to a fallback excuse."""
        started = time.perf_counter()
        fallback_excuse = self.rng.choice(get_fallback_pool(category, tone))

        if self._should_use_ai():
            result = await self._generate_with_ai(category, tone)
            if result is None:
                result = self._fallback(fallback_excuse)
        else:
            result = self._fallback(fallback_excuse)

        duration_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"Generated {result.source} excuse for {category}/{tone} "
            f"(believability={result.believability}, {duration_ms:.0f}ms)"
        )
        if self.metrics is not None:
            try:
                self.metrics.log(
                    "generate_excuse", duration_ms, category, tone, result.source
                )
            except Exception as e:
                logger.warning(f"Failed to record generation metrics: {e}")
        return result

    async def _generate_with_ai(self, category: str, tone: str) -> GenerationResult | None:
        """Ask OpenAI for an excuse. Returns None on any provider failure."""
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": build_excuse_prompt(category, tone)},
                ],
                response_format={"type": "json_object"},
                temperature=self.temperature,
            )
            content = response.choices[0].message.content or "{}"
            output = ExcuseOutput.model_validate_json(
                content, context={"default_believability": self.default_believability}
            )
        except Exception as e:
            logger.error(f"OpenAI excuse generation failed for {category}/{tone}: {e}")
            return None

        return GenerationResult(
            excuse=output.excuse,
            believability=output.believability,
            source=ExcuseSource.AI,
        )
