from pydantic import BaseModel, ConfigDict

DEFAULT_BACKGROUND_COLOR = "#dcf3f9"
DEFAULT_TITLE_BACKGROUND_COLOR = "#457b9d"


class TemplateSection(BaseModel):
    """A named panel of the generated description."""

    model_config = ConfigDict(frozen=True)

    name: str
    required: bool = False
    background_color: str = DEFAULT_BACKGROUND_COLOR
    title_background_color: str = DEFAULT_TITLE_BACKGROUND_COLOR
    generation_instruction: str = ""
    user_prompt: str = ""


class SectionContent(BaseModel):
    section: TemplateSection
    content: str = ""
