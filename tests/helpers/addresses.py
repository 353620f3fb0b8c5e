"""Participant addresses shared by the test suite.

SUPER_ADMIN and GATEWAY match TEST_REGISTRY_CONFIG.
"""

SUPER_ADMIN = "0xsuperadmin"
GATEWAY = "0xgateway"
OPERATOR = "0xoperator"
MANUFACTURER = "0xmanufacturer"
LABORATORY = "0xlaboratory"
REGULATOR = "0xregulator"
OFFICER = "0xofficer"
OUTSIDER = "0xoutsider"
