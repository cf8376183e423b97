from pydantic import ConfigDict, PositiveInt
from pydantic.dataclasses import dataclass

@dataclass(frozen=True, config=ConfigDict(extra="forbid"))
class ReleaseSettings:
    image_name: str = "bnk-dogecoin-electrs"
    namespace: str = "boolnetwork"
    manifest: str = "Cargo.toml"
    manifest_lines: PositiveInt = 3
    dockerfile: str = "Dockerfile"
    context: str = "."
    registry: str | None = None #docker hub when unset
    report_digests: bool = False
