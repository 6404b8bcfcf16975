import json


def api_response(status_code: int, body: dict | str) -> dict:
    """API Gateway HTTP API のレスポンス形式を生成する

    body が文字列の場合はエンコード済み JSON とみなしてそのまま返す。
    """
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": body if isinstance(body, str) else json.dumps(body, default=str),
    }
