from pydantic.dataclasses import dataclass

@dataclass(frozen=True)
class ImageTag:
    repository: str
    suffix: str = ""

    @property
    def reference(self) -> str:
        if not self.suffix:
            return self.repository
        return f"{self.repository}:{self.suffix}"
