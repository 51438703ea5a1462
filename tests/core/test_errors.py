from clientreg import errors


def test_error_description():
    error = errors.UnsupportedValueError("subject_type", "pairwise")
    assert error.error == "invalid_client_metadata"
    assert error.status_code == 400
    assert error.description == (
        "The value pairwise is not a supported value for the subject_type "
        "client registration metadata field."
    )


def test_error_to_dict():
    error = errors.DuplicateValueError("grant_types", "implicit")
    assert error.to_dict() == {
        "reason": "DUPLICATE_VALUE",
        "field": "grant_types",
        "value": "implicit",
        "status_code": 400,
    }


def test_redirect_uri_error():
    error = errors.MalformedURIError("redirect_uris", "http://[")
    assert error.error == "invalid_redirect_uri"

    error = errors.MalformedURIError("trusted_uri_prefixes", "http://[")
    assert error.error == "invalid_client_metadata"


def test_grant_response_mismatch_error():
    error = errors.GrantResponseMismatchError(
        "response_types", "code", required="authorization_code"
    )
    assert "authorization_code" in error.description
    assert error.to_dict()["required"] == "authorization_code"
    assert error.to_dict()["reason"] == "GRANT_RESPONSE_MISMATCH"


def test_output_parameter_error():
    error = errors.OutputParameterNotAllowedError("client_secret_expires_at", 12345)
    assert "output parameter" in error.description
    assert error.value == 12345


def test_description_is_escaped():
    error = errors.MalformedURIError("redirect_uris", 'https://client.test/"café"')
    assert "café" not in error.description
    assert "caf%C3%A9" in error.description
    assert '"' not in error.description
    # the raw value is kept for the caller
    assert error.value == 'https://client.test/"café"'
