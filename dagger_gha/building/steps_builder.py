from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Dict, List, Optional

from dagger_gha.building.helper import get_script
from dagger_gha.domain_model import ast
from dagger_gha.domain_model.contexts import github_env, secret_ref

if TYPE_CHECKING:
    from dagger_gha.pipeline import Pipeline

CHECKOUT_ACTION = "actions/checkout@v4"
# Local module resolution needs these even in a sparse checkout
MODULE_DISCOVERY_PATHS = ("dagger.json", ".dagger", "dagger", "ci")
CALL_PREFIX = "dagger call -q "
EXEC_STEP_ID = "exec"
CLOUD_TOKEN_SECRET = "DAGGER_CLOUD_TOKEN"


class StepsBuilder(ABC):
    @abstractmethod
    def build(self, pipeline: "Pipeline") -> List[ast.Step]:
        """
        Build the ordered steps of the job running a pipeline.

        Args:
            pipeline: The pipeline to run.

        Returns:
            List[ast.Step]: Steps in execution order.
        """
        pass


class DefaultStepsBuilder(StepsBuilder):
    """
    Builds the fixed step sequence: checkout, install Dagger, warm up the
    engine, run the pipeline and, when configured, stop the engine.
    """

    def build(self, pipeline: "Pipeline") -> List[ast.Step]:
        steps = [
            self.checkout_step(pipeline),
            self.install_dagger_step(pipeline),
            self.warm_engine_step(),
            self.call_dagger_step(pipeline),
        ]
        if pipeline.settings.stop_engine:
            steps.append(self.stop_engine_step())
        return steps

    def checkout_step(self, pipeline: "Pipeline") -> ast.Step:
        with_: Dict[str, str] = {}
        if pipeline.sparse_checkout:
            paths = list(pipeline.sparse_checkout) + list(MODULE_DISCOVERY_PATHS)
            with_["sparse-checkout"] = "\n".join(paths)
        if pipeline.lfs:
            with_["lfs"] = "true"
        return ast.Step(name_="Checkout", uses_=CHECKOUT_ACTION, with_=with_)

    def install_dagger_step(self, pipeline: "Pipeline") -> ast.Step:
        return self.bash_step(
            "Install Dagger",
            "install-dagger.sh",
            env={"DAGGER_VERSION": pipeline.settings.dagger_version},
        )

    def warm_engine_step(self) -> ast.Step:
        return self.bash_step("Warm up Dagger engine", "warm-engine.sh")

    def call_dagger_step(self, pipeline: "Pipeline") -> ast.Step:
        env: Dict[str, str] = {"COMMAND": CALL_PREFIX + pipeline.command}
        for secret_name in pipeline.secrets:
            env[secret_name] = secret_ref(secret_name)
        if pipeline.module:
            env["DAGGER_MODULE"] = pipeline.module
        if not pipeline.settings.no_traces:
            token = pipeline.settings.public_token or secret_ref(CLOUD_TOKEN_SECRET)
            env["DAGGER_CLOUD_TOKEN"] = token
            # For backwards compatibility with older engines
            env["_EXPERIMENTAL_DAGGER_CLOUD_TOKEN"] = token
        env.update(github_env())
        return self.bash_step("Run Dagger", "exec.sh", env=env, id_=EXEC_STEP_ID)

    def stop_engine_step(self) -> ast.Step:
        return self.bash_step("Stop Dagger engine", "stop-engine.sh")

    def bash_step(
        self,
        name: str,
        filename: str,
        env: Optional[Dict[str, str]] = None,
        id_: Optional[str] = None,
    ) -> ast.Step:
        """Return a step running the script shipped as `filename`."""
        return ast.Step(
            name_=name,
            id_=id_,
            shell_="bash",
            run_=get_script(filename),
            env_=env or {},
        )
