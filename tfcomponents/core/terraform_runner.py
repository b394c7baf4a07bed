"""
Terraform command execution for a single component.

Commands run in the component directory with the standard streams of
the current process, so prompts, colors and progress output reach the
terminal exactly as terraform writes them.
"""

import logging
import subprocess
from typing import List

from ..errors import TerraformExecutionError
from ..utils.validators import resolve_component, resolve_terraform_binary

logger = logging.getLogger(__name__)


class TerraformRunner:
    """
    Runs terraform subcommands inside one component directory.

    - The component path is validated before anything runs
    - shell=False always
    - No timeout: terraform may legitimately wait on a prompt forever
    - The exit code of terraform is returned to the caller
    """

    def __init__(self, component_path: str, terraform_binary: str = "terraform"):
        self.component_path = resolve_component(component_path)
        self.terraform_binary = terraform_binary

    def output(self) -> int:
        """Run terraform output."""
        return self._execute(self._build_command("output"))

    def plan(self) -> int:
        """Run terraform plan."""
        return self._execute(self._build_command("plan"))

    def apply(self, auto_approve: bool = False) -> int:
        """Run terraform apply."""
        cmd = self._build_command("apply")
        if auto_approve:
            cmd.append("-auto-approve")
        return self._execute(cmd)

    def destroy(self, auto_approve: bool = False) -> int:
        """Run terraform destroy."""
        cmd = self._build_command("destroy")
        if auto_approve:
            cmd.append("-auto-approve")
        return self._execute(cmd)

    def _build_command(self, operation: str) -> List[str]:
        """Construct the base command list [binary, operation]."""
        return [resolve_terraform_binary(self.terraform_binary), operation]

    def _execute(self, cmd: List[str]) -> int:
        """
        Run a command in the component directory and wait for it.

        A Ctrl-C reaches terraform through the terminal as well, so the
        interrupt is not re-raised here: terraform decides how to stop
        and we keep waiting until it has.

        Returns:
            terraform's exit code, or 128 + signal number when a signal
            killed it (the shell convention)
        """
        logger.info(f"Running {' '.join(cmd)} in {self.component_path}")

        try:
            process = subprocess.Popen(
                cmd,
                cwd=self.component_path,
                shell=False,
            )
        except OSError as e:
            raise TerraformExecutionError(f"Could not run '{cmd[0]}'", e) from e

        while True:
            try:
                exit_code = process.wait()
                break
            except KeyboardInterrupt:
                logger.info("Interrupted, waiting for terraform to exit")

        if exit_code < 0:
            logger.info(f"terraform {cmd[1]} was killed by signal {-exit_code}")
            return 128 - exit_code

        logger.info(f"terraform {cmd[1]} exited with code {exit_code}")
        return exit_code
