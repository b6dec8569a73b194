from openclaw_sandbox.config import SandboxConfig
from openclaw_sandbox.runtime import SandboxRuntime
from openclaw_sandbox.runtimes.local import LocalRuntime


class SandboxFactory:
    """
    Factory to create SandboxRuntime instances based on configuration.
    """

    @staticmethod
    def get_runtime(config: SandboxConfig) -> SandboxRuntime:
        """
        Returns an instance of the configured SandboxRuntime.
        """
        return LocalRuntime(config)
