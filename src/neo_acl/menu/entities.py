"""Navigation menu entities."""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple


@dataclass(frozen=True)
class MenuItem:
    """One navigation entry; ``resource`` None means always visible."""

    title: str
    icon: Optional[str] = None
    link: Optional[str] = None
    home: Optional[bool] = None
    group: Optional[bool] = None
    resource: Optional[str] = None
    children: Optional[Tuple["MenuItem", ...]] = None

    def __post_init__(self):
        if self.children is not None:
            object.__setattr__(self, "children", tuple(self.children))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MenuItem":
        children = data.get("children")
        return cls(
            title=data["title"],
            icon=data.get("icon"),
            link=data.get("link"),
            home=data.get("home"),
            group=data.get("group"),
            resource=data.get("resource"),
            children=tuple(cls.from_dict(child) for child in children) if children is not None else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "icon": self.icon,
            "link": self.link,
            "home": self.home,
            "group": self.group,
            "resource": self.resource,
            "children": [child.to_dict() for child in self.children] if self.children is not None else None,
        }
