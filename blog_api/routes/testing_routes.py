from flask import Blueprint

from blog_api.common.http import result_response
from blog_api.services import testing_service

testing_bp = Blueprint("testing", __name__)


@testing_bp.route("/testing/all-data", methods=["DELETE"])
def delete_all_data():
    return result_response(testing_service.delete_all_data())
