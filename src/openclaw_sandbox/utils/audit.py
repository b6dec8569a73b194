import hashlib

from openclaw_sandbox.utils.logger import logger


class AuditLogger:
    """
    Writes an audit record for every snippet handed to the sandbox.
    """

    def __init__(self, service_name: str = "openclaw-sandbox", enabled: bool = True):
        self.service_name = service_name
        self.enabled = enabled
        self._logger = logger.bind(audit=True, service=service_name)

    def log_pre_execution(self, code: str, language: str) -> str:
        """
        Log the code execution attempt. Returns a hash of the code.
        """
        code_hash = hashlib.sha256(code.encode("utf-8", errors="replace")).hexdigest()

        if self.enabled:
            try:
                self._logger.bind(
                    event_type="SANDBOX_EXECUTION_START",
                    language=language,
                    code_hash=code_hash,
                    code_length=len(code),
                ).info(f"SANDBOX_EXECUTION_START {language} {code_hash[:12]}")
            except Exception as e:
                logger.error(f"Audit logging failed: {e}")

        return code_hash
