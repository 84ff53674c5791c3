"""Moving fetched language templates into the local template folder."""

from __future__ import annotations

import os

from faaskit.copying import copy_files

TEMPLATE_DIRECTORY = "./template/"
_REPO_TEMPLATE_FOLDER = "template"


def template_folder_exists(
    language: str, overwrite: bool, template_dir: str | os.PathLike = TEMPLATE_DIRECTORY
) -> bool:
    """Tell whether the template for ``language`` may be written.

    Writing is refused when the folder already exists and ``overwrite`` is off.
    """
    path = os.path.join(template_dir, language)
    return overwrite or not os.path.exists(path)


def can_write_language(
    available_languages: dict[str, bool] | None,
    language: str,
    overwrite: bool,
    template_dir: str | os.PathLike = TEMPLATE_DIRECTORY,
) -> bool:
    """Tell whether ``language`` may be written, remembering the answer in ``available_languages``."""
    if available_languages is None or not language:
        return False
    if language in available_languages:
        return available_languages[language]
    can_write = template_folder_exists(language, overwrite, template_dir)
    available_languages[language] = can_write
    return can_write


def move_templates(
    repo_path: str | os.PathLike,
    overwrite: bool,
    template_dir: str | os.PathLike = TEMPLATE_DIRECTORY,
) -> tuple[list[str], list[str]]:
    """Copy each language folder under ``<repo_path>/template`` into ``template_dir``.

    Returns the languages left alone because they already existed and the
    languages copied. Raises ``FileNotFoundError`` when the repository has
    no template folder.
    """
    source_dir = os.path.join(repo_path, _REPO_TEMPLATE_FOLDER)
    try:
        names = sorted(os.listdir(source_dir))
    except OSError as exc:
        raise FileNotFoundError(f"can't find templates in: {os.fspath(repo_path)}") from exc

    available: dict[str, bool] = {}
    existing: list[str] = []
    fetched: list[str] = []
    for language in names:
        source = os.path.join(source_dir, language)
        if not os.path.isdir(source):
            continue
        if can_write_language(available, language, overwrite, template_dir):
            fetched.append(language)
            copy_files(source, os.path.join(template_dir, language))
        else:
            existing.append(language)
    return existing, fetched