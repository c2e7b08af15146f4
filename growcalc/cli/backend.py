from __future__ import annotations

import logging

from growcalc.config import log_level_from_env, web_config_from_env


def main() -> None:
    logging.basicConfig(
        level=log_level_from_env(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    from growcalc.web.app import app

    cfg = web_config_from_env()
    app.run(host=cfg.host, port=cfg.port, debug=cfg.debug)


if __name__ == "__main__":
    main()
