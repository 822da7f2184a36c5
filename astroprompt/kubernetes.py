"""The current Kubernetes context and namespace from kubeconfig files."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml

from astroprompt.utils import read_file


def _find_namespace(contexts: Any, current_ctx: str) -> str:
    if not isinstance(contexts, list):
        return ""
    for entry in contexts:
        if not isinstance(entry, dict):
            continue
        name = entry.get("name")
        if not isinstance(name, str) or name != current_ctx:
            continue
        context = entry.get("context")
        if isinstance(context, dict):
            namespace = context.get("namespace")
            if isinstance(namespace, str):
                return namespace
        return ""
    return ""


def get_kube_context(contents: str) -> tuple[str, str] | None:
    """The current context and its namespace ("" if none) from kubeconfig text."""
    try:
        documents = list(yaml.safe_load_all(contents))
    except yaml.YAMLError:
        return None
    if not documents:
        return None
    conf = documents[0]
    if not isinstance(conf, dict):
        return None

    current_ctx = conf.get("current-context")
    if not isinstance(current_ctx, str) or not current_ctx:
        return None

    return current_ctx, _find_namespace(conf.get("contexts"), current_ctx)


def parse_kubectl_file(filename: str | os.PathLike[str]) -> tuple[str, str] | None:
    """The current context and namespace from a kubeconfig file."""
    try:
        contents = read_file(filename)
    except (OSError, UnicodeDecodeError):
        return None
    return get_kube_context(contents)


def find_kube_context() -> tuple[str, str] | None:
    """The context from the first usable file in $KUBECONFIG, or ~/.kube/config."""
    paths = os.environ.get("KUBECONFIG")
    if paths is not None:
        for filename in paths.split(os.pathsep):
            result = parse_kubectl_file(filename)
            if result is not None:
                return result
        return None

    try:
        home = Path.home()
    except RuntimeError:
        return None
    return parse_kubectl_file(home / ".kube" / "config")