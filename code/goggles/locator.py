# code/goggles/locator.py
import logging

from lib import utils as shared_utils
from . import config_loader

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())  # Evite msg si non configuré


def locate_package(package_name: str) -> str:
    """
    Résout le répertoire d'installation d'une dépendance via 'bundle show <nom>'.

    Le code retour n'est pas vérifié: un paquet absent donne un chemin vide ou
    invalide, et l'erreur apparaît plus tard à la lecture des fichiers.
    """
    command = config_loader.get_tools_config()["locator_command"] + [package_name]
    logger.info(f"Résolution de l'emplacement de '{package_name}'")
    output = shared_utils.run_external_tool(command)
    # Seule la première ligne porte le chemin.
    package_root = output.splitlines()[0].strip() if output else ""
    logger.info(f"Emplacement résolu: '{package_root}'")
    return package_root
