"""
Service layer.

``upstream_client`` talks HTTP to the upstream employee service,
``envelope_codec`` turns its envelopes into typed records, ``top_k``
holds the bounded heap selection and ``employee_service`` ties them
together into the operations the API exposes.
"""
