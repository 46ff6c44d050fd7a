import math

SECONDS_PER_MINUTE = 60

def format_time(seconds: float) -> str:
    """Format seconds as MM:SS (minutes are not wrapped into hours)."""
    total = math.floor(seconds)
    minutes, secs = divmod(total, SECONDS_PER_MINUTE)
    return f"{minutes:02d}:{secs:02d}"
