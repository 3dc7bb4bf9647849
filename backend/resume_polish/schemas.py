from pydantic import BaseModel, ConfigDict
from typing import List


# Inbound
class PolishRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    section_type: str  # skills|work_experience|project|education|<anything else>


class PolishResponse(BaseModel):
    original: str
    polished: str
    improvements: List[str]


class PolishEnvelope(BaseModel):
    success: bool = True
    data: PolishResponse


# Outbound (OpenAI-compatible chat completions)
class ChatMessage(BaseModel):
    role: str
    content: str


class ChatCompletionRequest(BaseModel):
    model: str
    messages: List[ChatMessage]
    temperature: float = 0.7
    max_tokens: int = 2000


class ChatCompletionChoice(BaseModel):
    message: ChatMessage


class ChatCompletionResponse(BaseModel):
    choices: List[ChatCompletionChoice]
