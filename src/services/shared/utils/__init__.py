from .http_response import ErrorResponse as ErrorResponse
from .http_response import api_response as api_response
from .http_response import error_response as error_response
from .http_response import text_response as text_response
from .validators import to_decimal as to_decimal
from .validators import validation_details as validation_details
