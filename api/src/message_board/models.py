from typing import List

from pydantic import BaseModel


class Message(BaseModel):
    id: int
    name: str
    email: str
    message: str
    created_at: str


class MessageList(BaseModel):
    messages: List[Message]


class SubmitResult(BaseModel):
    success: bool = True
    message: str = "Message submitted successfully"
    id: int
