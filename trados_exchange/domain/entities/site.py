from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Site:
    node_name: str
    name: str
    site_package_key: str
