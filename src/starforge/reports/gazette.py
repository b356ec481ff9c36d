from ..core.log import AuditLog


def generate_gazette(log: AuditLog, tick: int) -> str:
    """
    Generates a concise gazette report from an AuditLog.
    """
    lines = [f"== Tick {tick} Report =="]
    for entry in log.entries:
        reason = entry.reason or ""
        if reason:
            lines.append(f"[{entry.type}] {reason}")
        else:
            lines.append(f"[{entry.type}]")
    return "\n".join(lines) + "\n"
