# backend/app/main.py

"""
バックエンドアプリケーションのエントリーポイント。

主な責務:
- /notifications/* エンドポイントを公開する
- /health エンドポイントを公開する
"""

from fastapi import FastAPI

from app.notifications.router import router as notifications_router


def create_app() -> FastAPI:
    """
    FastAPI アプリケーションファクトリ。

    - 通知エンドポイント (/notifications/*)
    - ヘルスチェックエンドポイント (/health)
    """
    app = FastAPI(title="Notification Dispatch Backend")

    # ルーター登録
    app.include_router(notifications_router)

    @app.get("/health", tags=["health"])
    def health_check() -> dict:
        """
        簡易ヘルスチェックエンドポイント。
        モニタリングや動作確認用。
        """
        return {"status": "ok"}

    return app


# uvicorn 実行時のエントリーポイント
app = create_app()
