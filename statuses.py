from enum import Enum
from typing import Dict, NamedTuple, Optional, Sequence, Tuple

from verses import VERSES


class StatusEntry(NamedTuple):
    code: int
    name: str
    message: str


class StatusClass(Enum):
    INFORMATIONAL = "informational"
    SUCCESS = "success"
    REDIRECTION = "redirection"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"


def status_class(code: int) -> StatusClass:
    if not 100 <= code <= 599:
        raise ValueError(f"{code} is not an HTTP status code")
    return list(StatusClass)[code // 100 - 1]


INFORMATIONAL = (
    StatusEntry(100, "Continue", "The initial part of the request has been received and the client should continue with the request."),
    StatusEntry(101, "Switching Protocols", "The server is switching protocols as requested by the client."),
    StatusEntry(102, "Processing", "The server has received and is processing the request, but no response is available yet."),
    StatusEntry(103, "Early Hints", "Used to return some response headers before final HTTP message."),
)

SUCCESS = (
    StatusEntry(200, "OK", "The request has succeeded."),
    StatusEntry(201, "Created", "The request has been fulfilled and a new resource has been created."),
    StatusEntry(202, "Accepted", "The request has been accepted for processing, but the processing has not been completed."),
    StatusEntry(203, "Non-Authoritative Information", "The returned metadata is not exactly the same as is available from the origin server."),
    StatusEntry(204, "No Content", "The server successfully processed the request, but is not returning any content."),
    StatusEntry(205, "Reset Content", "The server successfully processed the request, but is not returning any content. The client should reset the document view."),
    StatusEntry(206, "Partial Content", "The server is delivering only part of the resource due to a range header sent by the client."),
    StatusEntry(207, "Multi-Status", "The message body that follows is an XML message and can contain a number of separate response codes."),
    StatusEntry(208, "Already Reported", "The members of a DAV binding have already been enumerated in a preceding part of the (multistatus) response."),
    StatusEntry(226, "IM Used", "The server has fulfilled a request for the resource, and the response is a representation of the result of one or more instance-manipulations applied to the current instance."),
)

REDIRECTION = (
    StatusEntry(300, "Multiple Choices", "The request has more than one possible response."),
    StatusEntry(301, "Moved Permanently", "The URL of the requested resource has been changed permanently."),
    StatusEntry(302, "Found", "The URI of requested resource has been changed temporarily."),
    StatusEntry(303, "See Other", "The server sent this response to direct the client to get the requested resource at another URI with a GET request."),
    StatusEntry(304, "Not Modified", "This is used for caching purposes. It tells the client that the response has not been modified."),
    StatusEntry(305, "Use Proxy", "The requested resource is only available through a proxy, the address for which is provided in the response."),
    StatusEntry(307, "Temporary Redirect", "The server is sending this response to direct the client to get the requested resource at another URI with the same method that was used in the prior request."),
    StatusEntry(308, "Permanent Redirect", "This means that the resource is now permanently located at another URI."),
)

CLIENT_ERROR = (
    StatusEntry(400, "Bad Request", "The server could not understand the request due to invalid syntax."),
    StatusEntry(401, "Unauthorized", "Authentication is required and has failed or has not yet been provided."),
    StatusEntry(402, "Payment Required", "Reserved for future use."),
    StatusEntry(403, "Forbidden", "The client does not have access rights to the content."),
    StatusEntry(404, "Not Found", "The server can not find the requested resource."),
    StatusEntry(405, "Method Not Allowed", "The request method is known by the server but is not supported by the target resource."),
    StatusEntry(406, "Not Acceptable", "The server cannot produce a response matching the list of acceptable values."),
    StatusEntry(407, "Proxy Authentication Required", "Authentication with the proxy is required."),
    StatusEntry(408, "Request Timeout", "The server timed out waiting for the request."),
    StatusEntry(409, "Conflict", "The request could not be completed due to a conflict with the current state of the resource."),
    StatusEntry(410, "Gone", "The requested resource is no longer available at the server and no forwarding address is known."),
    StatusEntry(411, "Length Required", "The server refuses to accept the request without a defined Content-Length."),
    StatusEntry(412, "Precondition Failed", "The client has indicated preconditions in its headers which the server does not meet."),
    StatusEntry(413, "Payload Too Large", "The request entity is larger than limits defined by server."),
    StatusEntry(414, "URI Too Long", "The URI requested by the client is longer than the server is willing to interpret."),
    StatusEntry(415, "Unsupported Media Type", "The media format of the requested data is not supported by the server."),
    StatusEntry(416, "Range Not Satisfiable", "The range specified by the Range header field in the request cannot be fulfilled."),
    StatusEntry(417, "Expectation Failed", "The expectation indicated by the Expect request header field cannot be met by the server."),
    StatusEntry(418, "I'm a teapot", "The server refuses the attempt to brew coffee with a teapot."),
    StatusEntry(421, "Misdirected Request", "The request was directed at a server that is not able to produce a response."),
    StatusEntry(422, "Unprocessable Entity", "The request was well-formed but was unable to be followed due to semantic errors."),
    StatusEntry(423, "Locked", "The resource that is being accessed is locked."),
    StatusEntry(424, "Failed Dependency", "The request failed due to failure of a previous request."),
    StatusEntry(425, "Too Early", "The server is unwilling to risk processing a request that might be replayed."),
    StatusEntry(426, "Upgrade Required", "The server refuses to perform the request using the current protocol."),
    StatusEntry(428, "Precondition Required", "The origin server requires the request to be conditional."),
    StatusEntry(429, "Too Many Requests", "The user has sent too many requests in a given amount of time."),
    StatusEntry(431, "Request Header Fields Too Large", "The server is unwilling to process the request because its header fields are too large."),
    StatusEntry(451, "Unavailable For Legal Reasons", "The user requested a resource that is legally unavailable."),
)

SERVER_ERROR = (
    StatusEntry(500, "Internal Server Error", "The server has encountered a situation it doesn't know how to handle."),
    StatusEntry(501, "Not Implemented", "The request method is not supported by the server and cannot be handled."),
    StatusEntry(502, "Bad Gateway", "The server, while working as a gateway, got an invalid response from the upstream server."),
    StatusEntry(503, "Service Unavailable", "The server is not ready to handle the request."),
    StatusEntry(504, "Gateway Timeout", "The server is acting as a gateway and cannot get a response in time."),
    StatusEntry(505, "HTTP Version Not Supported", "The HTTP version used in the request is not supported by the server."),
    StatusEntry(506, "Variant Also Negotiates", "Transparent content negotiation for the request results in a circular reference."),
    StatusEntry(507, "Insufficient Storage", "The server is unable to store the representation needed to complete the request."),
    StatusEntry(508, "Loop Detected", "The server detected an infinite loop while processing the request."),
    StatusEntry(510, "Not Extended", "Further extensions to the request are required for the server to fulfill it."),
    StatusEntry(511, "Network Authentication Required", "The client needs to authenticate to gain network access."),
)

CANONICAL = INFORMATIONAL + SUCCESS + REDIRECTION + CLIENT_ERROR + SERVER_ERROR

# Codes that only exist on this server.
FICTIONAL_NAMES: Dict[int, str] = {
    452: "Signal Echo",
    453: "Request Loop",
    512: "Cache Overflow",
    513: "Socket Timeout",
}

VERSE_CODES = (
    tuple(entry.code for entry in CLIENT_ERROR) + (452, 453)
    + tuple(entry.code for entry in SERVER_ERROR) + (512, 513)
)

_NAMES = {entry.code: entry.name for entry in CANONICAL}
_NAMES.update(FICTIONAL_NAMES)


def build_table(
    variant: str = "canonical", verses: Optional[Sequence[str]] = None
) -> Tuple[StatusEntry, ...]:
    """Build the flattened status table for ``variant``.

    ``canonical`` is every real status code with its standard description.
    ``verses`` keeps only the error classes and takes each message from the
    verse pool by position, wrapping when the pool is shorter than the table.
    """
    if variant == "canonical":
        return CANONICAL
    if variant != "verses":
        raise ValueError(f"Unknown status table {variant!r}")

    pool = tuple(verses) if verses is not None else VERSES
    if not pool:
        raise ValueError("Verse pool is empty")
    return tuple(
        StatusEntry(code, _NAMES[code], pool[i % len(pool)])
        for i, code in enumerate(VERSE_CODES)
    )
