PUBLISHED = "Review submitted successfully"
PENDING_APPROVAL = "Review submitted and pending approval"
ALREADY_REVIEWED = "You have already reviewed this company"
OWN_REVIEW_VOTE = "You cannot vote on your own review"
ALREADY_REPORTED = "You have already reported this review"
MARKED_HELPFUL = "Marked review as helpful"
UNMARKED_HELPFUL = "Removed helpful mark"
REPORTED = "Review reported successfully"
