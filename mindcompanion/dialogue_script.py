"""Canned replies used by the responder."""

RESPONSES = {
    "greeting": "Hello! I'm MindCompanion, your AI mental health companion. I'm here to listen and support you. How are you feeling today?",
    "gratitude": "You're very welcome! I'm glad I could be here for you. How are you feeling right now? Is there anything else you'd like to talk about?",
    "uncertainty": "It's completely okay to not know or to feel uncertain. Sometimes our feelings and thoughts can be confusing, and that's normal. Can you tell me more about what's making you feel unsure? Sometimes talking through our confusion can help us find some clarity.",
    "sadness_why": "I can hear that you're feeling sad and asking why. That's such an important question to explore. Sometimes sadness comes from specific events, losses, or changes in our lives. Other times it might feel like it comes out of nowhere. Can you tell me more about what's been happening in your life lately? Understanding what's behind our sadness can sometimes help us process it better.",
    "sadness": "I can hear that you're feeling sad, and I want you to know that your feelings are completely valid. Sadness is a natural human emotion, and it's okay to feel this way. Can you tell me more about what's contributing to these feelings? Sometimes talking about what's on your mind can help lighten the load.",
    "loneliness": "Feeling lonely can be one of the hardest emotions to experience. You're not alone in feeling this way, even though it might feel like it. I'm here with you right now. What would help you feel more connected? Sometimes even small steps toward connection can make a big difference.",
    "anxiety": "I understand you're feeling anxious, and that can be really overwhelming. Anxiety is your body's way of trying to protect you, but sometimes it can feel like too much. What's been making you feel anxious lately? Sometimes naming our fears can help us feel a little more in control.",
    "help": "I'm here to listen, support, and help you work through whatever you're experiencing. I can help you explore your feelings, practice coping strategies, or just be a safe space to talk. What would be most helpful for you right now? Sometimes just having someone listen can make a world of difference.",
    "identity": "I'm MindCompanion, your AI mental health companion. I'm here to listen, support, and help you through whatever you're going through. I don't have time limits - we can talk for as long as you need. What's on your mind today?",
    "duration": "I don't have any time limits - we can talk for as long as you need. I'm here whenever you need support, whether that's for a few minutes or much longer. Your mental health journey is important, and I'm committed to being here for you. What would you like to talk about?",
    "stress": "It sounds like you're feeling stressed or overwhelmed, and that's completely understandable. Stress can feel like it's piling up on us. What's been causing you the most stress lately? Sometimes breaking down what's overwhelming us into smaller pieces can help us feel more in control.",
    "anger": "I can hear that you're feeling angry or frustrated, and those are completely valid emotions. Anger often comes from feeling hurt, powerless, or misunderstood. What's been making you feel this way? Sometimes talking about what's behind our anger can help us understand and process these feelings.",
    "negative_feeling": "I can hear that you're feeling really bad right now, and I want you to know that your feelings are valid. Sometimes when we feel this way, it can be hard to see a way forward. Can you tell me more about what's contributing to these feelings? I'm here to listen and support you through this.",
    "positive_feeling": "I'm glad to hear you're feeling better! That's wonderful. How are you doing today? Is there anything specific that's been helping you feel this way?",
    "sleep": "I can hear that sleep is on your mind. Sleep and mental health are closely connected - when we're struggling emotionally, it often affects our sleep, and poor sleep can make our mental health challenges feel even harder. What's been happening with your sleep lately? Sometimes talking about our sleep patterns can help us understand what might be affecting our overall wellbeing.",
    "relationships": "I can hear that relationships are on your mind. Relationships can be such a source of both joy and stress in our lives. How are your relationships affecting how you're feeling right now? Sometimes talking about our connections with others can help us understand our own emotions better.",
    "work_school": "I can hear that work or school is on your mind. These areas of our lives can have a big impact on how we feel overall. What's been happening with work or school that's affecting you? Sometimes talking about these pressures can help us find ways to manage them better.",
    "coping": "I can hear you're thinking about coping strategies and self-care. That's such an important part of taking care of our mental health. What's been working for you lately? Sometimes sharing what helps us can be really valuable, and I'm here to support you in finding what works best for you.",
    "acknowledgment": "I hear you. Can you tell me more about what's on your mind? I want to understand what you're experiencing so I can better support you.",
    "off_topic": "I understand you're asking about that, but I'm here specifically to support your mental health and emotional wellbeing. How are you feeling today? Is there anything on your mind that you'd like to talk about? I'm here to listen and help you work through whatever you're experiencing.",
    "question": "I can hear you're asking some important questions. I'm here to help you explore these thoughts and feelings. Can you tell me more about what's on your mind? Sometimes talking through our questions can help us find our own answers.",
    "fallback": "I'm here to listen and support you. It sounds like you're going through something important. Can you tell me more about what's on your mind? I want to understand what you're experiencing so I can better support you.",
}

# Used when a reply has to be produced without looking at the message.
fallback_responses = [
    "I understand you're going through a difficult time. Can you tell me more about what's been on your mind lately?",
    "That sounds really challenging. It's completely normal to feel this way. What strategies have helped you cope in the past?",
    "I'm here to listen and support you. What would you like to focus on today?",
    "It takes courage to share what you're feeling. How can I help you work through this?",
    "I can sense this is important to you. What would you like to explore together?",
    "Thank you for trusting me with this. Let's work through this step by step.",
    "I'm here to support you through this. What's one small thing that might help you feel better right now?",
    "Your feelings are valid and important. What would you like to do to take care of yourself today?",
]
