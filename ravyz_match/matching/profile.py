"""Loading candidate, job and questionnaire files."""

from __future__ import annotations

import json
from pathlib import Path

import yaml

from ravyz_match.matching.models import CandidateProfile, JobProfile


class ProfileLoader:
    """Loads and validates profiles and raw responses from YAML or JSON."""

    def load_candidate(self, path: Path | str) -> CandidateProfile:
        return CandidateProfile.model_validate(self.load_mapping(path))

    def load_job(self, path: Path | str) -> JobProfile:
        return JobProfile.model_validate(self.load_mapping(path))

    def load_responses(self, path: Path | str) -> dict[str, object]:
        """Load a ``{question_id: answer}`` mapping.

        A top-level ``responses`` key is unwrapped when present. Answers are
        returned untouched; validation happens at scoring time.
        """
        data = self.load_mapping(path)
        responses = data.get("responses", data)
        if not isinstance(responses, dict):
            raise ValueError(f"Responses must be a mapping/dict: {path}")
        return {str(key): value for key, value in responses.items()}

    def load_mapping(self, path: Path | str) -> dict:
        """Read a YAML or JSON document that must be a mapping."""
        file_path = Path(path)
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        suffix = file_path.suffix.lower()
        if suffix in {".yaml", ".yml"}:
            return self._load_yaml(file_path)
        if suffix == ".json":
            return self._load_json(file_path)
        return self._load_unknown(file_path)

    def _load_yaml(self, path: Path) -> dict:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML file: {path}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"File must contain a mapping/dict: {path}")
        return data

    def _load_json(self, path: Path) -> dict:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON file: {path}") from e

        if not isinstance(data, dict):
            raise ValueError(f"File must contain a mapping/dict: {path}")
        return data

    def _load_unknown(self, path: Path) -> dict:
        """Auto-detect the format when the extension is not recognised."""
        raw = path.read_text(encoding="utf-8")

        # Try JSON first if it looks like JSON, otherwise fall back to YAML.
        if raw.lstrip().startswith(("{", "[")):
            try:
                data = json.loads(raw)
            except json.JSONDecodeError:
                pass
            else:
                if not isinstance(data, dict):
                    raise ValueError(f"File must contain a mapping/dict: {path}")
                return data

        try:
            data = yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise ValueError(f"Unrecognised file format: {path}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"File must contain a mapping/dict: {path}")
        return data
