import os


class Core:
    def __init__(self, config: dict | None = None) -> None:
        discord_cfg = (config or {}).get("arraybutt", {}).get("discord", {})

        token_env = str(discord_cfg.get("token_env", "BOT_TOKEN"))
        self.DISCORD_API_TOKEN: str | None = os.getenv(token_env)

        if not self.DISCORD_API_TOKEN:
            raise ValueError(f"Missing environment variables: {token_env}")
