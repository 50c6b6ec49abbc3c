class VoteExpiredError(RuntimeError):
    """
    在已超时的投票上继续投票时抛出。
    正常流程中 VoteManager 会先检查并清理过期投票，因此这个异常不应到达用户。
    """

    def __init__(self, message: str = "Vote has expired"):
        super().__init__(message)
