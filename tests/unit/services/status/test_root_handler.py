from services.status.handlers import root


def test_root_returns_plain_text_status(lambda_context):
    response = root.lambda_handler({"httpMethod": "GET", "path": "/"}, lambda_context)

    assert response["statusCode"] == 200
    assert response["headers"]["Content-Type"].startswith("text/plain")
    assert response["body"] == "SkySwift API is running. Use /api/flights or /api/bookings"
