from pydantic import BaseModel, Field


class AskRequest(BaseModel):
    # questions asked so far, the last one is the one to answer
    questions: list[str] = Field(default_factory=list, max_length=200)
    # one fewer than questions (or empty on the first question)
    responses: list[str] = Field(default_factory=list, max_length=200)


class AskResponse(BaseModel):
    response: str
