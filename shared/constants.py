"""
Constants and configuration values for the MSK client-config generator.
"""

# kcl client timeout written into every generated document
KCL_TIMEOUT_MILLIS = 10000

# Bootstrap broker string fields returned by kafka:GetBootstrapBrokers
BROKER_STRING_KEYS = {
    "plaintext": "BootstrapBrokerString",
    "tls": "BootstrapBrokerStringTls",
    "sasl-scram": "BootstrapBrokerStringSaslScram",
    "sasl-iam": "BootstrapBrokerStringSaslIam",
    "public-tls": "BootstrapBrokerStringPublicTls",
    "public-sasl-scram": "BootstrapBrokerStringPublicSaslScram",
    "public-sasl-iam": "BootstrapBrokerStringPublicSaslIam",
}

DEFAULT_BROKER_TYPE = "plaintext"

# Serverless clusters carry no broker software version
SERVERLESS_VERSION = "serverless"

# Broker types a serverless cluster can serve
SERVERLESS_BROKER_TYPES = ("sasl-iam",)

# Logging configuration
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    "suppress_modules": ["boto3", "botocore", "urllib3"],
}
