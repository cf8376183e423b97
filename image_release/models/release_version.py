from pydantic.dataclasses import dataclass

@dataclass(frozen=True)
class ReleaseVersion:
    number: str
    prerelease: bool = False #set when the manifest excerpt mentions "beta"
