# typedheaders

Strongly typed HTTP headers. Each header class knows its own field name. It
decodes from the raw values (`bytes`) found in a message and encodes back
into raw values that can be sent.

## Installation

```
pip install typedheaders
```

## A header map with typed access

`typedheaders.headermap.HeaderMap` holds raw header values in insertion
order and matches names without regard to case. `append`, `insert`, `get`,
`get_all` and `remove` work with raw values. Strings and integers are
accepted on the way in. Values always come back as `bytes`. The map also
reads and writes typed headers:

```python
from typedheaders.headermap import HeaderMap
from typedheaders.headers import TransferEncoding, UserAgent, Vary

headers = HeaderMap()
headers.typed_insert(TransferEncoding.chunked())
headers.typed_insert(UserAgent.parse("example-client/1.0"))

assert headers.get("Transfer-Encoding") == b"chunked"
assert headers.typed_get(UserAgent).as_str() == "example-client/1.0"

headers.append("Vary", "accept-encoding")
headers.append("Vary", "accept-language")
vary = headers.typed_get(Vary)
assert list(vary.iter_strs()) == ["accept-encoding", "accept-language"]
```

- `typed_insert` replaces any values already stored under the header's name.
- `typed_get` returns `None` when the header is missing or malformed.
- `typed_try_get` returns `None` only when the header is missing. It raises
  `typedheaders.core.InvalidHeader` when the value cannot be decoded.

`len(headers)` counts values. Iterating a map yields `(name, value)` pairs
with lower-case names.

## Available headers

- `StrictTransportSecurity` is in `typedheaders.strict_transport_security`.
  It is built with `including_subdomains(max_age)` or
  `excluding_subdomains(max_age)`, where `max_age` is a `timedelta` of whole
  seconds.
- `typedheaders.headers` holds five headers:
  - `Te`, with the constructor `trailers()`.
  - `TransferEncoding`, with the constructor `chunked()` and the method `is_chunked()`.
  - `Upgrade`, with the constructor `websocket()`.
  - `UserAgent`. `parse(text)` raises `InvalidUserAgent` when the text is not a legal value.
  - `Vary`, with the constructor `any()` and the methods `is_any()` and `iter_strs()`.
- `Prefer`, `PreferenceApplied` and `Preference` are in `typedheaders.prefer`.
  `PreferenceApplied` leaves preference parameters out when it encodes.
- `WarningHeader` is in `typedheaders.warning`.

```python
from datetime import timedelta
from typedheaders.strict_transport_security import StrictTransportSecurity

sts = StrictTransportSecurity.including_subdomains(timedelta(days=365))
assert sts.encode() == [b"max-age=31536000; includeSubdomains"]

decoded = StrictTransportSecurity.decode([b"max-age=15768000 ; includeSubDomains"])
assert decoded.include_subdomains()
assert decoded.max_age() == timedelta(seconds=15768000)
```

## Building blocks

- `typedheaders.entity`:
  - `EntityTag` parses tags such as `"xyzzy"` and `W/"xyzzy"`. It compares them with `strong_eq` and `weak_eq`.
  - `EntityTagRange` is either `*` or a list of tags. It offers `matches_strong` and `matches_weak`.
- `typedheaders.http_date.HttpDate` parses IMF-fixdate, RFC 850 and asctime dates. It always writes IMF-fixdate.
- `typedheaders.seconds.Seconds` is a non-negative whole number of seconds.
- `typedheaders.value_string.HeaderValueString` is text that is also a legal header value.
- `typedheaders.flat_csv`:
  - `FlatCsv` merges several values into one value joined by `,` or `;`. It splits that value again and does not split inside double quotes.
  - `from_comma_delimited` and `fmt_comma_delimited` parse and format plain comma-separated lists.
- `typedheaders.quality`:
  - `QualityValue` parses and formats `item; q=weight`.
  - `Quality` and `q()` make weights from an int in 0..1000 or a float in 0.0..1.0.
- `typedheaders.codings`:
  - `Charset` is an enum of common MIME charsets. It parses without regard to ASCII case.
  - `Encoding` names content and transfer codings.

## Custom headers

Subclass `typedheaders.core.Header`:

1. Set the class attribute `name` to the lower-case field name.
2. Implement the class method `decode(values)`. It receives the raw `bytes` values and raises `InvalidHeader` on failure.
3. Implement `encode()`. It returns a list of raw `bytes` values.

The helpers `just_one`, `make_value` and `value_str` in the same module are
there for that work.

## What this package does not do

This is a library of header types only. It does not send or receive HTTP
messages. It has no client, server or command-line tool.

Only the headers listed above have classes. There are no typed classes for
many other common headers, such as Content-Type, Content-Length, Host,
Accept, Cache-Control or ETag. Those can be read and written as raw values
through `HeaderMap`, or added as custom `Header` subclasses.