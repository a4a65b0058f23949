"""Capitalized words that are never character names.

Sentence-initial function words, common verbs, adverbs and nouns, calendar
words and screenplay formatting terms.
"""

COMMON_CAPITALIZED = frozenset(
    """
    About Above Absolutely Accept Accepted Accepting According Achieve Achieved
    Achieving Across Actually After Afternoon Again Against Agree Agreed
    Agreeing Ahead Air All Allow Allowed Allowing Almost Along Already Also
    Although Always Among And Angle Another Answer Answers Any Anybody Anyone
    Anything Anyway Anywhere Appear Appeared Appearing Applied Apply Applying
    April Are Around Arrive Arrived Arriving Ask Asked Asking Assuming Ate
    August Away Baby Back Backward Barely Basically Bathroom Beach Became
    Because Become Becoming Bed Bedroom Been Before Began Begin Beginning Begun
    Behind Being Believe Believed Below Beneath Beside Besides Between Beyond
    Blood Body Book Books Both Bought Boy Break Breaking Bring Bringing Broke
    Broken Brother Brought Build Building Built But Buy Buying Call Called
    Calling Came Can Captain Carefully Carried Carry Carrying Case Cases Catch
    Catching Caught Ceiling Certainly Chair Change Changed Changing Chapter
    Child Children Choice Choose Choosing Chose Chosen Church City Clearly
    Close Closed Closing Colonel Come Coming Completely Concerning Consider
    Considered Considering Contain Contained Containing Continue Continued
    Continuing Continuous Control Controlled Controlling Could Country Create
    Created Creating Cut Cutting Dare Dark Darkness Dawn Day Death December
    Decide Decided Deciding Deeply Define Defined Defining Definitely Depend
    Depended Depending Describe Described Describing Desk Despite Determine
    Determined Determining Develop Developed Developing Did Die Died Dissolve
    Doctor Does Door Down Downward Drank Dream Dreamed Dreaming Dreams Dreamt
    Drink Drinking Driver Drunk During Dusk Dying Each Earlier Earth Eat Eaten
    Eating Either End Ends Enemies Enemy Enter Entered Entering Entirely
    Especially Establish Established Establishing Even Evening Eventually
    Everybody Everyone Everything Everywhere Exactly Example Examples Exist
    Existed Existing Expect Expected Expecting Explain Explained Explaining Ext
    Eye Eyes Face Fact Facts Fade Fall Fallen Falling Family Father Fear
    February Feel Feeling Fell Felt Few Fight Fighting Figure Figures Finally
    Find Finding Fire First Floor Follow Followed Following For Forest Forget
    Forgetting Forgot Forgotten Form Forms Forward Fought Found Frequently
    Friday Friend Friends From Fully Furthermore Garden Gave General Generally
    Gently Get Girl Give Given Giving Goes Going Gold Gone Got Governor Greatly
    Grew Group Groups Grow Growing Grown Had Hand Hands Happen Happened
    Happening Hardly Has Hate Have Head Hear Heard Hearing Heart Held Help
    Helped Helping Her Here Hers Herself Highly Him Himself His Hit Hitting
    Hold Holding Home Hope Hospital Hotel Hour Hours House How However Idea
    Ideas Identified Identify Identifying Imagine Immediately Improve Improved
    Improving Include Included Including Increase Increased Increasing Indeed
    Inside Instead Int Into Involve Involved Involving Island Its Itself
    January Join Joined Joining Judge July June Just Keep Keeping Kept Kill
    Killed Killing Kind Kinds King Kitchen Knew Know Knowing Known Lady Laid
    Lake Last Later Lay Lead Leading Learn Learned Learning Leave Leaving Led
    Left Let Letter Letters Lie Lies Life Light Like Liked Liking Line Lines
    Listen Listened Listening Live Lived Living Look Looked Looking Lord Lose
    Losing Lost Loudly Love Lying Madam Made Maintain Maintained Maintaining
    Major Make Making Man Manage Managed Managing Many March May Maybe Mayor
    Meanwhile Meet Meeting Memories Memory Men Merely Met Might Mind Mine
    Minute Minutes Moment Monday Money Month Months Moon Moreover Morning Most
    Mostly Mother Mountain Move Moved Must Myself Name Names Near Nearly Need
    Neither Never Nevertheless News Next Night Nobody None Nor Normally Note
    Notes Nothing Notice November Now Nowhere Number Numbers Obtain Obtained
    Obtaining Obviously Occasionally Occur Occurred Occurring Ocean October Off
    Offer Offered Offering Office Officer Often Once Only Open Opened Opening
    Other Otherwise Ought Our Ours Ourselves Out Outside Over Page Paid Pain
    Paragraph Park Part Particularly Partly Parts Pay Paying Peace People
    Perhaps Person Picture Place Places Plan Plans Play Played Playing Point
    Points Power Prepare Prepared Preparing Present Presented Presenting
    President Prince Princess Probably Problem Problems Produce Produced
    Producing Professor Provide Provided Providing Put Queen Question Questions
    Quickly Quietly Quite Ran Rarely Rather Reach Reached Reaching Read Reader
    Reading Reason Reasons Recall Receive Received Receiving Reduce Reduced
    Reducing Reflect Reflected Reflecting Refuse Refused Refusing Regarding
    Relate Related Relating Remain Remained Remaining Remember Remembered
    Remembering Report Reported Reporting Represent Represented Representing
    Require Required Requiring Restaurant Result Results Return Returned
    Returning Rise Risen Rising River Road Room Rose Run Running Said Sat
    Saturday Saw Say Saying Scene School Sea Second Seconds Secret Secrets
    Section See Seeing Seem Seemed Seeming Seen Sell Selling Senator Send
    Sending Sent September Serve Served Serving Set Setting Several Shadow
    Shall She Shot Should Show Showed Showing Shown Side Sides Sideways Silver
    Simply Since Sir Sister Sit Sitting Sky Sleep Sleeping Slept Slowly Softly
    Sold Some Somebody Somehow Someone Something Sometimes Somewhere Soon Sort
    Sorts Sound Speak Speaking Specifically Spend Spending Spent Spoke Spoken
    Stand Standing Star Stars Start Started State States Still Stood Stop
    Stopped Stories Story Stranger Strangers Street Student Suddenly Suggest
    Suggested Suggesting Sun Sunday Sunrise Sunset Support Supported Supporting
    Suppose Supposed Supposing Table Take Taken Taking Talk Talked Talking
    Taught Teach Teacher Teaching Tears Tell Telling That The Their Theirs Them
    Themselves Then There Therefore These They Thing Things Think Thinking
    Third This Those Though Thought Thoughts Threw Through Throughout Throw
    Throwing Thrown Thursday Time Times Today Told Tomorrow Tonight Too Took
    Totally Toward Towards Town Tree Tried Truth Try Trying Tuesday Turn Turned
    Turning Type Types Typically Under Understand Understanding Understood
    Unless Until Upon Upward Used Usually Very Voice Volume Wait Waited Waiting
    Walk Walked Walking Wall Want Wanted Wanting War Was Watch Watched Watching
    Water Way Ways Wear Wearing Wednesday Week Weeks Were What Whatever When
    Whenever Where Wherever Whether Which Whichever While Who Whoever Whom
    Whomever Whose Why Wide Will Win Window Winning With Within Without Woman
    Women Won Wonder Wondered Wondering Word Words Wore Work Worked Worker
    Working World Worn Would Write Writer Writing Written Wrote Year Years
    Yesterday Yet You Your Yours Yourself
    """.split()
)
