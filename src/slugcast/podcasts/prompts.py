"""Prompt templates for announcements, slugs and recommendations.

Provides three built-in templates:
- announcement: Tell the user their podcast is ready
- slug: Ask for an SEO-friendly URL slug
- recommendation: Pick the best stored podcast for a preference
"""

from jinja2 import StrictUndefined, Template
from pydantic import BaseModel, Field


class PromptTemplate(BaseModel):
    """A prompt with named ``{{ placeholders }}`` filled in before sending."""

    name: str
    description: str
    system_prompt: str | None = None
    user_prompt_template: str = Field(..., description="Jinja2 template for the user turn")

    def render(self, **variables: str) -> str:
        """Render the user prompt.

        Raises:
            jinja2.UndefinedError: If a placeholder has no value
        """
        return Template(self.user_prompt_template, undefined=StrictUndefined).render(**variables)


ANNOUNCEMENT_PROMPT = PromptTemplate(
    name="announcement",
    description="Upbeat message that a requested podcast is ready",
    user_prompt_template="""You are an enthusiastic podcast producer who just created an amazing new podcast episode.

A user requested a podcast about: {{ query }}
The podcast has been generated and is available at: {{ url }}

Write an exciting, friendly response (2-3 sentences) telling them their podcast is ready.
Use an upbeat tone and mention the topic specifically.
Include the URL in your response.

Example format: "Great! Your podcast about [topic] has been generated and is ready to listen! Check it out at [URL] - I think you'll love the insights we covered!"

Make it sound natural and engaging, not robotic.""",  # noqa: E501
)

SLUG_PROMPT = PromptTemplate(
    name="slug",
    description="Unique, SEO-friendly URL slug for a topic",
    user_prompt_template="""Generate a unique, SEO-friendly URL slug for a podcast about: {{ topic }}

Requirements:
- Use only lowercase letters, numbers, and hyphens
- Make it descriptive and memorable
- Keep it between 3-8 words
- Avoid generic words like "podcast", "episode", "show"
- Make it specific to the topic

Examples:
- For "artificial intelligence in healthcare": "ai-transforms-medical-diagnosis"
- For "sustainable energy solutions": "clean-power-future-tech"
- For "space exploration": "mars-mission-breakthrough"
- For "shoes": "footwear-fashion-trends"
- For "Starbucks": "coffee-culture-deep-dive"

Return ONLY the slug, nothing else.""",
)

RECOMMENDATION_PROMPT = PromptTemplate(
    name="recommendation",
    description="Recommend stored podcasts that match a preference",
    system_prompt=(
        "You are a helpful podcast recommendation assistant. Based on a user preference "
        "and a list of available podcasts, recommend the best matching podcast(s). "
        "Be enthusiastic and explain why your recommendation fits their request. "
        "Include the full URL in your response."
    ),
    user_prompt_template="""User preference: "{{ preference }}"

Available podcasts:
{{ catalog }}

Please recommend the best podcast(s) that match my preference and explain why.""",
)
