ARM64 = "arm64"
ARMV8 = "armv8"
AMD64 = "amd64"
X64 = "x64"
X86_64 = "x86_64"
I386 = "i386"
X86 = "x86"

LINUX = "linux"
WINDOWS = "windows"

SUPPORTED_ARCHITECTURES = {
    LINUX: (ARM64, ARMV8, AMD64, X64, X86_64),
    WINDOWS: (AMD64, I386, X86, X64, X86_64),
}

DEFAULT_REGION = "us-west-2"
DEFAULT_S3_FOLDER_PREFIX = "demo"
DEFAULT_AGENT_DIRECTORY_NAME = "demo-agent"

POLICY_VERSION = "2012-10-17"
POLICY_PATH = "/"
ATTACHED_POLICIES_PAGE_SIZE = 100

IOT_CREDENTIALS_SERVICE = "credentials.iot.amazonaws.com"
IOT_SERVICE = "iot.amazonaws.com"
SAGEMAKER_SERVICE = "sagemaker.amazonaws.com"
