from pydantic.dataclasses import dataclass

@dataclass(frozen=True)
class GitObject:
    type: str #commit for lightweight tags, tag for annotated tag objects
    sha: str

    def is_tag_object(self) -> bool:
        return self.type == "tag"
