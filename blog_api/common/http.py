from flask import jsonify

from blog_api.common.result import Result, ResultStatus, errors_payload, result_status_to_http


def result_response(result: Result, success_status: int = 204):
    if result.ok:
        if success_status == 204:
            return "", 204
        return jsonify(result.data), success_status

    status_code = result_status_to_http(result.status)
    if result.status is ResultStatus.BAD_REQUEST and result.extensions:
        return jsonify(errors_payload(result.extensions)), status_code
    return jsonify({"error": result.status.value}), status_code
