from __future__ import annotations

import uvicorn

from algoevo.api.server import create_app
from algoevo.system.config_loader import load_system_config
from algoevo.system.logger import init_logger


def main() -> None:
    cfg = load_system_config()
    log_cfg = cfg["logging_cfg"]
    init_logger("algoevo", log_dir=log_cfg.log_dir if log_cfg.to_file else None, level=log_cfg.level)
    app = create_app(cfg)
    api_cfg = cfg["api_cfg"]
    uvicorn.run(app, host=api_cfg.host, port=api_cfg.port)


if __name__ == "__main__":
    main()
