"""Move analysis inputs and results between Streamlit session state and storage."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, MutableMapping, Optional

import streamlit as st

from analysis import compute, validate
from analysis.validation import ValidationResult
from config.settings import get_owner

from .storage import load_inputs, save_inputs

logger = logging.getLogger(__name__)

INPUTS_KEY = "analysis_inputs"
LAST_VALID_KEY = "analysis_last_valid"
RESULT_KEY = "analysis_result"
ERRORS_KEY = "analysis_errors"
LOAD_ERRORS_KEY = "analysis_load_errors"
AUTO_LOADED_KEY = "_analysis_inputs_auto_loaded"


def _session(session: Optional[MutableMapping[str, Any]]) -> MutableMapping[str, Any]:
    return st.session_state if session is None else session


def run_analysis(raw: Dict[str, Any], session: Optional[MutableMapping[str, Any]] = None) -> ValidationResult:
    """
    Validate and compute in one step, replacing whatever the previous run left.

    Only a record that validates becomes the "last valid" record eligible for
    saving.
    """
    state = _session(session)
    state[INPUTS_KEY] = dict(raw)

    outcome = validate(raw)
    if not outcome.ok:
        state[RESULT_KEY] = None
        state[ERRORS_KEY] = dict(outcome.errors)
        return outcome

    state[RESULT_KEY] = compute(outcome.profile)
    state[ERRORS_KEY] = {}
    state[LAST_VALID_KEY] = dict(raw)
    return outcome


def save_current_inputs(
    session: Optional[MutableMapping[str, Any]] = None,
    owner: Optional[str] = None,
    base_dir: Optional[Path] = None,
) -> Path:
    state = _session(session)
    record = state.get(LAST_VALID_KEY)
    if not record:
        raise ValueError("Nothing to save yet: run a successful analysis first.")
    return save_inputs(owner or get_owner(), record, base_dir=base_dir)


def auto_load_inputs(
    session: Optional[MutableMapping[str, Any]] = None,
    owner: Optional[str] = None,
    base_dir: Optional[Path] = None,
) -> bool:
    """
    Restore saved inputs once per session. Returns True when inputs were applied.

    Saved records are re-validated; a record that no longer passes is kept out
    of the form and its errors are left under LOAD_ERRORS_KEY.
    """
    state = _session(session)
    if state.get(AUTO_LOADED_KEY):
        return False
    state[AUTO_LOADED_KEY] = True

    record = load_inputs(owner or get_owner(), base_dir=base_dir)
    if not record:
        return False

    outcome = validate(record)
    if not outcome.ok:
        logger.warning("Saved inputs failed validation: %s", ", ".join(sorted(outcome.errors)))
        state[LOAD_ERRORS_KEY] = dict(outcome.errors)
        return False

    state[INPUTS_KEY] = dict(record)
    state[LAST_VALID_KEY] = dict(record)
    state.pop(LOAD_ERRORS_KEY, None)
    return True
