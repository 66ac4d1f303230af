"""Discord webhook execute payload models."""

from pydantic import BaseModel, Field


class DiscordAuthor(BaseModel):
    name: str = ""
    icon_url: str = ""


class DiscordFooter(BaseModel):
    text: str = ""


class DiscordField(BaseModel):
    name: str
    value: str = ""


class DiscordEmbed(BaseModel):
    """One rendered alert."""

    title: str = ""
    author: DiscordAuthor = Field(default_factory=DiscordAuthor)
    description: str = ""
    fields: list[DiscordField] = Field(default_factory=list)
    color: int = 0
    footer: DiscordFooter = Field(default_factory=DiscordFooter)


class DiscordMessage(BaseModel):
    """One webhook call, carrying one embed per alert of a status group."""

    content: str = ""
    username: str = ""
    avatar_url: str = ""
    embeds: list[DiscordEmbed] = Field(default_factory=list)
