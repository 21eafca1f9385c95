from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

INFO_PREFIX = "[INFO] "
SEPARATOR_MARKER = INFO_PREFIX + "-" * 70
SUMMARY_MARKER = INFO_PREFIX + "Reactor Summary"


class CommandsCfg(BaseModel):
    version: str = Field("mvn -v", min_length=1)
    build: str = Field("mvn clean verify -B -T 1.5C -U", min_length=1)

    class Config:
        extra = "forbid"


class LogCfg(BaseModel):
    path: str = "build.log"
    level: LogLevel = "INFO"

    class Config:
        extra = "forbid"


class WindowCfg(BaseModel):
    capacity: int = Field(2000, ge=1)

    class Config:
        extra = "forbid"


class MarkersCfg(BaseModel):
    summary: str = SUMMARY_MARKER
    separator: str = SEPARATOR_MARKER
    strip_prefix: str = INFO_PREFIX

    class Config:
        extra = "forbid"


class BuildConfig(BaseModel):
    commands: CommandsCfg = Field(default_factory=CommandsCfg)
    log: LogCfg = Field(default_factory=LogCfg)
    window: WindowCfg = Field(default_factory=WindowCfg)
    markers: MarkersCfg = Field(default_factory=MarkersCfg)

    class Config:
        extra = "forbid"
