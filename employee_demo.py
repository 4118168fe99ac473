import argparse

import structlog

from application.use_cases.run_employee_demo import run_employee_demo
from infrastructure.config.settings import settings
from infrastructure.logging_config import setup_logging

log = structlog.get_logger(__name__)


def wait_for_key() -> None:
    try:
        input()
    except EOFError:
        pass


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Cria e compara funcionários, validando os campos.")
    parser.add_argument("--no-pause", action="store_true",
                        help="Não espera uma tecla antes de sair")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL,
                        help="Nível de log (padrão: %(default)s)")
    parser.add_argument("--json-logs", action="store_true", default=settings.LOG_JSON,
                        help="Força logs em JSON")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level, force_json=args.json_logs)

    pause = None if args.no_pause or not settings.DEMO_PAUSE_ON_EXIT else wait_for_key
    result = run_employee_demo(pause=pause)
    log.info("Demo finished", validation_error=result.validation_error)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
