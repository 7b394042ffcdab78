class HttpResponseCode:
    HTTP_200_OK = 200
    HTTP_400_BAD_REQUEST = 400
    HTTP_404_NOT_FOUND = 404

    HTTP_RESPONSE_MESSAGES = {
        HTTP_200_OK: "OK",
        HTTP_400_BAD_REQUEST: "Bad Request",
        HTTP_404_NOT_FOUND: "Not Found",
    }


def status_line(status_code):
    # Existing clients expect the space after the reason phrase
    return f"HTTP/1.1 {status_code} {HttpResponseCode.HTTP_RESPONSE_MESSAGES[status_code]} "


STATUS_OK = status_line(HttpResponseCode.HTTP_200_OK)
STATUS_BAD_REQUEST = status_line(HttpResponseCode.HTTP_400_BAD_REQUEST)
STATUS_NOT_FOUND = status_line(HttpResponseCode.HTTP_404_NOT_FOUND)
