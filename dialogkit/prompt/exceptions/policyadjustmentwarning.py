"""
module dialogkit.prompt.exceptions.policyadjustmentwarning

Contains the definition of the PolicyAdjustmentWarning class, the warning
category issued whenever a prompt option was corrected or ignored while a
prompt specification was being built
"""


class PolicyAdjustmentWarning(UserWarning):
    """
    class PolicyAdjustmentWarning

    Warning category issued whenever a prompt option was corrected or
    ignored while a prompt specification was being built
    """
