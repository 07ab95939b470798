import argparse

import uvicorn
from config import ApplicationConfig
from src.api.app import create_app


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Points Ledger Service")
    parser.add_argument(
        "--host", default=ApplicationConfig.API_HOST, help="Interface to bind"
    )
    parser.add_argument(
        "--port", type=int, default=ApplicationConfig.API_PORT, help="The port to listen on"
    )
    parser.add_argument(
        "--log-path",
        default=ApplicationConfig.LOG_PATH,
        help="File or directory where logs are written. A directory gets one "
             "points_<date>.log file per day.",
    )
    return parser.parse_args(argv)


if __name__ == "__main__":
    args = parse_args()
    ApplicationConfig.API_HOST = args.host
    ApplicationConfig.API_PORT = args.port
    ApplicationConfig.LOG_PATH = args.log_path

    uvicorn.run(
        create_app(ApplicationConfig),
        host=ApplicationConfig.API_HOST,
        port=ApplicationConfig.API_PORT,
        log_level=ApplicationConfig.LOG_LEVEL.lower(),
    )
