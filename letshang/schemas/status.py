from pydantic import BaseModel


class HealthOut(BaseModel):
    status: str
    timestamp: str
    message: str
    version: str


class RootOut(BaseModel):
    message: str
    version: str
    endpoints: dict[str, str]


class EchoData(BaseModel):
    users: int
    activities: int
    status: str


class EchoOut(BaseModel):
    message: str
    timestamp: str
    data: EchoData
