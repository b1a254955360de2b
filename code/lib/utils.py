# code/lib/utils.py

import subprocess
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Union
import logging

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())  # Evite msg si non configuré


def setup_logging(debug_mode: bool = False,
                  log_file: Optional[Union[str, Path]] = None):
    # Console sur stderr uniquement: stdout porte le rapport.
    root_log_level = logging.DEBUG if debug_mode else logging.WARNING
    log_level_console = root_log_level
    log_level_file = logging.DEBUG

    log_format = '%(asctime)s - %(levelname)-8s - [%(name)s:%(lineno)d] - %(message)s'
    date_format = '%Y-%m-%d %H:%M:%S'

    root_logger = logging.getLogger()
    if root_logger.hasHandlers():
        for handler in root_logger.handlers[:]:
            if not (isinstance(handler, logging.StreamHandler)
                    and handler.stream in [sys.stdout, sys.stderr]):
                try:
                    handler.close()
                except Exception as e_close:
                    print(
                        f"Avertissement: Échec fermeture handler log: {e_close}",
                        file=sys.stderr)
            root_logger.removeHandler(handler)

    handlers_to_add = []
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level_console)
    console_handler.setFormatter(
        logging.Formatter(log_format, datefmt=date_format))
    handlers_to_add.append(console_handler)

    if log_file:
        try:
            log_path = Path(log_file).resolve()
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path,
                                               mode='a',
                                               encoding='utf-8')
            file_handler.setLevel(log_level_file)
            file_handler.setFormatter(
                logging.Formatter(log_format, datefmt=date_format))
            handlers_to_add.append(file_handler)
        except OSError as e:
            print(
                f"ERREUR: Impossible configurer logging fichier vers {log_file}: {e}",
                file=sys.stderr)

    # Le niveau racine suit le handler le plus bavard.
    has_file_handler = any(
        isinstance(h, logging.FileHandler) for h in handlers_to_add)
    root_logger.setLevel(log_level_file if has_file_handler else root_log_level)
    for handler in handlers_to_add:
        root_logger.addHandler(handler)

    console_level_name = logging.getLevelName(log_level_console)
    file_level_name = logging.getLevelName(
        log_level_file) if has_file_handler else 'Non activé'
    logger.info(
        f"Logging configuré. Console >= {console_level_name}, Fichier >= {file_level_name}"
    )


def print_stage_header(title: str):
    width = len(title) + 6
    logger.info("=" * width)
    logger.info(f"== {title.upper()} ==")
    logger.info("=" * width)


def run_external_tool(command: Sequence[str]) -> str:
    """
    Exécute un outil externe et retourne sa sortie standard, nettoyée (strip).

    Le code retour n'est PAS vérifié: un échec de l'outil donne une sortie vide
    ou partielle, signalée uniquement par un avertissement dans les logs.
    Aucun timeout n'est imposé. Un exécutable introuvable lève FileNotFoundError.
    """
    cmd: List[str] = [str(part) for part in command]
    logger.debug(f"Commande externe: {' '.join(cmd)}")
    proc = subprocess.run(cmd,
                          capture_output=True,
                          text=True,
                          encoding='utf-8',
                          errors='replace')
    if proc.returncode != 0:
        stderr_output = proc.stderr.strip() if proc.stderr else "<N/A>"
        logger.warning(
            f"Commande '{cmd[0]}' terminée avec le code {proc.returncode}. Stderr:\n{stderr_output}"
        )
    stdout = (proc.stdout or "").strip()
    if not stdout:
        logger.warning(f"Sortie vide pour la commande '{cmd[0]}'.")
    else:
        logger.debug(f"Sortie '{cmd[0]}' (début): {stdout[:500]}")
    return stdout
