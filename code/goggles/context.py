# code/goggles/context.py
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping


def trim(text: str) -> str:
    """Retire les espaces/sauts de ligne de début et de fin. Idempotent."""
    return text.strip()


@dataclass(frozen=True)
class ReportContext:
    """
    Données collectées pour un rapport, construites une seule fois par exécution.

    Tous les champs texte sont nettoyés (trim) à la construction. file_contents
    est exposé en lecture seule et conserve l'ordre de la liste de fichiers fixe.
    """
    package_name: str
    package_root: str
    loc_summary: str
    file_contents: Mapping[str, str]
    manifest_content: str

    def __post_init__(self):
        # frozen=True: passer par object.__setattr__ pendant la construction.
        object.__setattr__(self, "loc_summary", trim(self.loc_summary))
        object.__setattr__(self, "manifest_content", trim(self.manifest_content))
        object.__setattr__(
            self, "file_contents",
            MappingProxyType({path: trim(content) for path, content in self.file_contents.items()}))

    def as_bindings(self) -> Dict[str, Any]:
        """Noms exposés au template (noms courants et noms historiques gem_*/cloc_*)."""
        return {
            "package_name": self.package_name,
            "gem_name": self.package_name,
            "package_root": self.package_root,
            "gem_location": self.package_root,
            "loc_summary": self.loc_summary,
            "cloc_output": self.loc_summary,
            "file_contents": self.file_contents,
            "files": self.file_contents,
            "manifest_content": self.manifest_content,
            "gemspec_content": self.manifest_content,
        }
