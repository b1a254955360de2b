# code/goggles/collector.py
"""
Collecte des données du rapport pour un paquet déjà localisé:
résumé cloc, contenu des fichiers sources fixes et contenu du gemspec.

Toute lecture de fichier manquant lève une exception non interceptée
(FileNotFoundError) qui interrompt l'exécution. L'échec de cloc, lui,
n'interrompt rien: le résumé est simplement vide.
"""
from pathlib import Path
from typing import Dict, Iterable, Optional, Union
import logging

from lib import utils as shared_utils
from . import config_loader
from . import locator
from .context import ReportContext, trim

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())  # Evite msg si non configuré

# Chemins relatifs à la racine du paquet, dans l'ordre du rapport.
FIXED_SOURCE_FILES = (
    "lib/climate_control.rb",
    "lib/climate_control/environment.rb",
    "lib/climate_control/errors.rb",
    "lib/climate_control/modifier.rb",
    "lib/climate_control/version.rb",
)

MANIFEST_EXTENSION = "gemspec"

PathLike = Union[str, Path]


def collect_loc_summary(package_root: PathLike) -> str:
    command = config_loader.get_tools_config()["loc_command"] + [str(package_root)]
    logger.info(f"Comptage des lignes de code dans: {package_root}")
    return trim(shared_utils.run_external_tool(command))


def _read_text(path: Path) -> str:
    logger.debug(f"Lecture: {path}")
    return trim(path.read_text(encoding='utf-8'))


def _package_file(package_root: PathLike, rel_path: str) -> Path:
    # Jointure textuelle: une racine vide donne '/<chemin>', jamais le répertoire courant.
    return Path(f"{package_root}/{rel_path}")


def read_source_files(package_root: PathLike,
                      relative_paths: Iterable[str] = FIXED_SOURCE_FILES) -> Dict[str, str]:
    files: Dict[str, str] = {}
    for rel_path in relative_paths:
        files[rel_path] = _read_text(_package_file(package_root, rel_path))
    logger.info(f"{len(files)} fichier(s) source lu(s) depuis '{package_root}'.")
    return files


def manifest_path(package_root: PathLike, package_name: str) -> Path:
    return _package_file(package_root, f"{package_name}.{MANIFEST_EXTENSION}")


def read_manifest(package_root: PathLike, package_name: str) -> str:
    return _read_text(manifest_path(package_root, package_name))


def build_context(package_name: str, package_root: Optional[PathLike] = None) -> ReportContext:
    """
    Construit le ReportContext complet pour `package_name`.

    Si `package_root` n'est pas fourni, il est résolu via le locator.
    Aucune reprise sur erreur, aucun résultat partiel.
    """
    if package_root is None:
        shared_utils.print_stage_header("Étape 1: Localisation du paquet")
        package_root = locator.locate_package(package_name)

    shared_utils.print_stage_header("Étape 2: Collecte des données")
    loc_summary = collect_loc_summary(package_root)
    files = read_source_files(package_root)
    manifest_content = read_manifest(package_root, package_name)

    return ReportContext(
        package_name=package_name,
        package_root=str(package_root),
        loc_summary=loc_summary,
        file_contents=files,
        manifest_content=manifest_content,
    )
