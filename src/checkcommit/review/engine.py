# src/checkcommit/review/engine.py
import yaml
import logging
from datetime import datetime
from pathlib import Path
from pydantic import ValidationError
from unidiff.errors import UnidiffParseError
from checkcommit.exceptions import ConfigurationError, PersistenceError
from checkcommit.models.config import ProjectType, RepoConfig
from checkcommit.models.review import GateResult
from checkcommit.platforms.base import DiffSource
from checkcommit.providers.base import LLMProvider
from .classifier import is_comment_only
from .gate import decide, write_report
from .parser import filter_diff
from .prompts import build_prompt


logger = logging.getLogger(__name__)

CHECKLIST_FILE = "checklist.md"
REPORT_FILE = "checkcommit_report.md"
CONFIG_FILE = "checkcommit.yaml"


def load_checklist(project_dir: Path) -> str:
    checklist_path = project_dir / CHECKLIST_FILE
    if not checklist_path.is_file():
        raise ConfigurationError(f"Checklist not found at {checklist_path}")
    try:
        return checklist_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ConfigurationError(f"Checklist {checklist_path} is not valid UTF-8: {e}") from e


def load_config(project_dir: Path) -> RepoConfig:
    """Load checkcommit.yaml next to the checklist or use defaults."""
    config_path = project_dir / CONFIG_FILE
    if not config_path.is_file():
        return RepoConfig()

    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
        return RepoConfig(**data)
    except (yaml.YAMLError, ValidationError, TypeError) as e:
        logger.warning(f"Invalid {CONFIG_FILE}: {e}")
        return RepoConfig()


class CommitGate:
    def __init__(
        self,
        provider: LLMProvider,
        diff_source: DiffSource,
        project_dir: str | Path,
        project_type: ProjectType = ProjectType.DOTNET,
        config: RepoConfig | None = None,
        log_dir: str | None = None,
    ):
        self.provider = provider
        self.diff_source = diff_source
        self.project_dir = Path(project_dir)
        self.project_type = project_type
        self.config = config or load_config(self.project_dir)
        self.log_dir = Path(log_dir) if log_dir else None

    @property
    def report_path(self) -> Path:
        return self.project_dir / REPORT_FILE

    async def run(self, checklist: str | None = None) -> GateResult:
        """Review the staged changes against the project checklist."""
        if checklist is None:
            checklist = load_checklist(self.project_dir)
        config = self.config

        diff = await self.diff_source.get_staged_diff()
        if not diff.strip():
            return GateResult.no_changes()

        if config.exclude:
            try:
                diff = filter_diff(diff, config.exclude)
            except UnidiffParseError as e:
                logger.warning(f"Could not parse staged diff, reviewing it unfiltered: {e}")
            if not diff.strip():
                return GateResult.no_changes("All staged files are excluded from review")

        comment_only = is_comment_only(diff, self.project_type)
        if comment_only:
            logger.info("Only comments changed, reviewing spelling and clarity")

        prompt = build_prompt(checklist, diff, comment_only, config)
        self._save_prompt_log(prompt)

        verdict = await self.provider.review(prompt)
        result = decide(verdict, marker=config.marker, policy=config.absent_verdict)

        try:
            write_report(self.report_path, verdict)
        except PersistenceError as e:
            logger.warning(str(e))

        return result

    def _save_prompt_log(self, prompt: str) -> None:
        """Save the prompt sent to the model, when a log dir is configured."""
        if not self.log_dir:
            return
        try:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_path = self.log_dir / f"{timestamp}_{self.project_type.value}.txt"
            header = f"Project: {self.project_dir}\nTime: {timestamp}\n\n"
            log_path.write_text(header + prompt, encoding="utf-8")
            logger.info(f"Prompt log saved: {log_path}")
        except OSError as e:
            logger.warning(f"Failed to save prompt log: {e}")
