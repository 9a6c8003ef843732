from botocore.exceptions import ClientError

NOT_FOUND_CODE = 'NoSuchEntity'


class ProvisioningError(Exception):
    """An IAM call failed for a reason other than the resource being absent."""

    def __init__(self, operation, resource, cause):
        self.operation = operation
        self.resource = resource
        self.cause = cause
        super().__init__(f"Failed to {operation} '{resource}': {cause}")


def is_not_found(error):
    return isinstance(error, ClientError) and error.response.get('Error', {}).get('Code') == NOT_FOUND_CODE
