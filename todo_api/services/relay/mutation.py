from typing import Any, Callable, Dict, Mapping

CLIENT_MUTATION_ID = "client_mutation_id"

DomainFn = Callable[[Dict[str, Any]], Mapping[str, Any]]


def mutate_with_client_mutation_id(domain_fn: DomainFn, input: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Run a domain mutation, passing the client mutation id through untouched.

    The id is removed from the fields handed to `domain_fn` and copied onto its
    result. If the input has no id, neither does the payload.
    """
    fields = dict(input)
    has_client_mutation_id = CLIENT_MUTATION_ID in fields
    client_mutation_id = fields.pop(CLIENT_MUTATION_ID, None)

    payload = dict(domain_fn(fields))
    if has_client_mutation_id:
        payload[CLIENT_MUTATION_ID] = client_mutation_id
    else:
        payload.pop(CLIENT_MUTATION_ID, None)
    return payload
