"""`python -m src` - uvicorn으로 서버 실행 (PORT 환경 변수, 기본 3000)"""
import uvicorn

from src.core.config import settings


def main() -> None:
    uvicorn.run("src.app:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
