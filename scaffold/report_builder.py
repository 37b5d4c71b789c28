"""
Report Builder Module
Renders the init summary shown to the user using Jinja2 templates.
"""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from scaffold.config_store import CONFIG_FILENAME
from scaffold.init_command import InitResult, InitStatus, StepStatus

class ReportBuilder:
    def __init__(self):
        self.env = Environment(
            loader=FileSystemLoader(str(Path(__file__).parent / 'templates')),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template('init_summary.txt.j2')
        self.data = {}

    def collect_metrics(self, result: InitResult) -> dict:
        """Organize an init result into template variables."""
        self.data = {
            'already_initialized': result.status == InitStatus.ALREADY_INITIALIZED,
            'degraded': result.status == InitStatus.DEGRADED,
            'config_file': CONFIG_FILENAME,
            'dependencies': result.dependencies,
            'tailwind_v4': result.tailwind_v4,
            'steps': {step.name: step for step in result.steps},
            'warnings': result.warnings,
            'done': StepStatus.DONE,
            'warning': StepStatus.WARNING,
        }
        return self.data

    def generate_text_report(self, result: InitResult) -> str:
        """Render the summary printed after `init`."""
        return self.template.render(**self.collect_metrics(result))
