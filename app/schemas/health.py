from pydantic import BaseModel


class MemoryUsage(BaseModel):
    used: float
    total: float
    percentage: float


class HealthResponse(BaseModel):
    status: str
    timestamp: str
    uptime: float
    version: str
    environment: str
    memory: MemoryUsage


class SystemInfo(BaseModel):
    platform: str
    pythonVersion: str
    uptime: float


class DetailedHealthResponse(BaseModel):
    status: str
    timestamp: str
    services: dict[str, str]
    system: SystemInfo
    error_statistics: dict
