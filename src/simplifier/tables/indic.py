"""
src/simplifier/tables/indic.py
===============================
Indian-Language Lookup Tables — Vaani Simplifier

Formal / Sanskritised vocabulary mapped to the everyday spoken form, one
table per supported script-language:

    HINDI, BENGALI, TAMIL, TELUGU, MARATHI, GUJARATI

PAUSE_CONJUNCTIONS lists the words after which a long sentence may be
broken (see segmenter.py), across English and the Indic languages.
"""

from types import MappingProxyType


# ---------------------------------------------------------------------------
# Hindi (हिंदी)
# ---------------------------------------------------------------------------

HINDI = MappingProxyType({
    # Verb phrases
    "उपयोग करना": "इस्तेमाल करना",
    "प्रयोग करना": "इस्तेमाल करना",
    "प्रारंभ करना": "शुरू करना",
    "आरंभ करना": "शुरू करना",
    "समाप्त करना": "खत्म करना",
    "प्रदर्शित करना": "दिखाना",
    "सहायता करना": "मदद करना",
    "प्राप्त करना": "पाना",
    "सूचित करना": "बताना",
    "प्रतीक्षा करना": "इंतजार करना",
    "निवेदन करना": "गुजारिश करना",
    "विषय में": "के बारे में",
    "कदापि नहीं": "कभी नहीं",
    # Single words
    "उपयोग": "इस्तेमाल",
    "प्रयोग": "इस्तेमाल",
    "प्रारंभ": "शुरू",
    "आरंभ": "शुरू",
    "समाप्त": "खत्म",
    "सहायता": "मदद",
    "आवश्यक": "जरूरी",
    "महत्वपूर्ण": "जरूरी",
    "कठिन": "मुश्किल",
    "सरल": "आसान",
    "शीघ्र": "जल्दी",
    "तुरंत": "अभी",
    "पूर्व": "पहले",
    "पश्चात": "बाद में",
    "तत्पश्चात": "उसके बाद",
    "उपरांत": "बाद में",
    "संबंधित": "के बारे में",
    "अतः": "इसलिए",
    "परंतु": "लेकिन",
    "किंतु": "लेकिन",
    "तथा": "और",
    "एवं": "और",
    "अथवा": "या",
    "यद्यपि": "हालांकि",
    "अर्थात": "मतलब",
    "हेतु": "के लिए",
    "सदैव": "हमेशा",
    "प्रतिदिन": "हर दिन",
    "सूचना": "जानकारी",
    "स्थान": "जगह",
    "समस्या": "परेशानी",
    "समाधान": "हल",
    "अवसर": "मौका",
    "अनुभव": "तजुर्बा",
    "विशेष": "खास",
    "सामान्य": "आम",
    "प्रत्येक": "हर",
    "संपूर्ण": "पूरा",
    "विभिन्न": "अलग-अलग",
    "उपलब्ध": "मिलता है",
    "आवश्यकता": "जरूरत",
    "प्रयास": "कोशिश",
    "सफलता": "कामयाबी",
    "असफलता": "नाकामी",
    "वृद्धि": "बढ़ना",
    "कमी": "घटना",
    "निर्माण": "बनाना",
    "विकास": "तरक्की",
    "परिवर्तन": "बदलाव",
    "निर्णय": "फैसला",
    "स्वीकार": "मंजूर",
    "अस्वीकार": "नामंजूर",
    "अत्यधिक": "बहुत ज्यादा",
    "अत्यंत": "बहुत",
    "पर्याप्त": "काफी",
    "अधिक": "ज्यादा",
    "उत्तम": "अच्छा",
    "श्रेष्ठ": "सबसे अच्छा",
    "निकट": "पास",
    "वर्तमान": "अभी का",
    "प्रश्न": "सवाल",
    "उत्तर": "जवाब",
    "प्रतिक्रिया": "जवाब",
    "विद्यालय": "स्कूल",
    "चिकित्सालय": "अस्पताल",
    "चिकित्सक": "डॉक्टर",
    "औषधि": "दवा",
    "रोग": "बीमारी",
    "स्वास्थ्य": "सेहत",
    "भोजन": "खाना",
    "जल": "पानी",
    "वाहन": "गाड़ी",
    "धन": "पैसा",
    "निवास": "घर",
    "आवास": "घर",
    "गृह": "घर",
    "कार्य": "काम",
    "कार्यालय": "दफ्तर",
    "यात्रा": "सफर",
    "प्रतीक्षा": "इंतजार",
    "क्षमा": "माफी",
    "आभार": "धन्यवाद",
    "प्रसन्न": "खुश",
    "प्रसन्नता": "खुशी",
    "क्रोध": "गुस्सा",
    "भय": "डर",
    "चिंता": "फिक्र",
    "आश्चर्य": "हैरानी",
    "शिक्षा": "पढ़ाई",
    "पुस्तक": "किताब",
    "मित्र": "दोस्त",
    "नगर": "शहर",
    "ग्राम": "गांव",
    "मार्ग": "रास्ता",
    "द्वार": "दरवाजा",
    "वस्त्र": "कपड़े",
    "प्रातः": "सुबह",
    "सायं": "शाम",
    "रात्रि": "रात",
    "दिवस": "दिन",
    "सप्ताह": "हफ्ता",
    "वर्ष": "साल",
    "मूल्य": "कीमत",
    "सम्मान": "इज्जत",
    "विचार": "सोच",
    "सत्य": "सच",
    "असत्य": "झूठ",
    "संभव": "हो सकता है",
    "असंभव": "नहीं हो सकता",
    "उचित": "सही",
    "अनुचित": "गलत",
    "त्रुटि": "गलती",
    "समाचार": "खबर",
    "संदेश": "खबर",
    "दूरभाष": "फोन",
    "व्यक्ति": "आदमी",
    "बालक": "बच्चा",
    "बालिका": "बच्ची",
    "स्त्री": "औरत",
    "माता": "माँ",
    "अवकाश": "छुट्टी",
    "परीक्षा": "इम्तिहान",
    "परिणाम": "नतीजा",
    "कारण": "वजह",
    "उद्देश्य": "मकसद",
    "अनुमति": "इजाजत",
    "आज्ञा": "इजाजत",
    "वार्तालाप": "बातचीत",
})


# ---------------------------------------------------------------------------
# Bengali (বাংলা)
# ---------------------------------------------------------------------------

BENGALI = MappingProxyType({
    "ব্যবহার করা": "ব্যবহার",
    "প্রারম্ভ করা": "শুরু করা",
    "সমাপ্ত করা": "শেষ করা",
    "প্রদর্শন করা": "দেখানো",
    "সহায়তা করা": "সাহায্য করা",
    "প্রাপ্ত করা": "পাওয়া",
    "প্রয়োজনীয়": "দরকারি",
    "গুরুত্বপূর্ণ": "জরুরি",
    "কঠিন": "শক্ত",
    "সহজ": "সোজা",
    "দ্রুত": "তাড়াতাড়ি",
    "অবিলম্বে": "এখনই",
    "পূর্বে": "আগে",
    "সম্পর্কিত": "সম্বন্ধে",
    "অতএব": "তাই",
    "এবং": "আর",
    "অথবা": "বা",
    "তথ্য": "খবর",
    "স্থান": "জায়গা",
})


# ---------------------------------------------------------------------------
# Tamil (தமிழ்)
# ---------------------------------------------------------------------------

TAMIL = MappingProxyType({
    "பயன்படுத்த": "உபயோகம்",
    "தொடங்க": "ஆரம்பி",
    "முடிக்க": "முடி",
    "காட்ட": "காட்டு",
    "உதவி": "உதவி செய்",
    "பெற": "வாங்கு",
    "தேவையான": "வேண்டிய",
    "முக்கியமான": "முக்கியம்",
    "கடினமான": "கஷ்டம்",
    "எளிதான": "சுலபம்",
    "விரைவான": "வேகம்",
    "உடனடியாக": "இப்போதே",
    "முன்பு": "முன்",
    "பின்பு": "பின்",
    "தொடர்பான": "பற்றி",
    "எனவே": "அதனால்",
    "ஆனால்": "ஆனா",
    "மற்றும்": "மேலும்",
    "அல்லது": "இல்லை",
    "தகவல்": "செய்தி",
    "பிரச்சனை": "பிரச்சினை",
    "வாய்ப்பு": "சான்ஸ்",
})


# ---------------------------------------------------------------------------
# Telugu (తెలుగు)
# ---------------------------------------------------------------------------

TELUGU = MappingProxyType({
    "ఉపయోగించు": "వాడు",
    "ప్రారంభించు": "మొదలు పెట్టు",
    "ముగించు": "అయిపోయింది",
    "చూపించు": "చూపు",
    "సహాయం": "సహాయం చేయి",
    "పొందు": "తీసుకో",
    "అవసరమైన": "కావాల్సిన",
    "ముఖ్యమైన": "ముఖ్యం",
    "కష్టమైన": "కష్టం",
    "సులభమైన": "తేలిక",
    "వేగంగా": "త్వరగా",
    "వెంటనే": "ఇప్పుడే",
    "సంబంధించిన": "గురించి",
    "కాబట్టి": "అందుకే",
    "మరియు": "మరి",
    "సమాచారం": "వార్త",
    "స్థలం": "చోటు",
    "సమస్య": "ఇబ్బంది",
})


# ---------------------------------------------------------------------------
# Marathi (मराठी)
# ---------------------------------------------------------------------------

MARATHI = MappingProxyType({
    "वापरणे": "वापर",
    "सुरू करणे": "सुरू कर",
    "संपवणे": "संपव",
    "दाखवणे": "दाखव",
    "मदत करणे": "मदत कर",
    "मिळवणे": "मिळव",
    "आवश्यक": "गरजेचे",
    "महत्त्वाचे": "महत्वाचे",
    "कठीण": "अवघड",
    "वेगवान": "वेगाने",
    "तात्काळ": "आता",
    "संबंधित": "बद्दल",
    "म्हणून": "त्यामुळे",
    "परंतु": "पण",
    "ठिकाण": "जागा",
    "समस्या": "अडचण",
})


# ---------------------------------------------------------------------------
# Gujarati (ગુજરાતી)
# ---------------------------------------------------------------------------

GUJARATI = MappingProxyType({
    "ઉપયોગ કરવો": "વાપરવું",
    "શરૂ કરવું": "શરૂ કરો",
    "સમાપ્ત કરવું": "પૂરું કરો",
    "બતાવવું": "બતાવો",
    "મદદ કરવી": "મદદ કરો",
    "મેળવવું": "લો",
    "મહત્વપૂર્ણ": "અગત્યનું",
    "મુશ્કેલ": "અઘરું",
    "સરળ": "સહેલું",
    "ઝડપી": "ઝડપથી",
    "તાત્કાલિક": "હમણાં",
    "પહેલાં": "પહેલા",
    "સંબંધિત": "વિશે",
    "પરંતુ": "પણ",
    "અથવા": "કે",
    "માહિતી": "જાણકારી",
    "સ્થળ": "જગ્યા",
    "સમસ્યા": "મુશ્કેલી",
})


# ---------------------------------------------------------------------------
# Pause-point conjunctions (compared lower-cased)
# ---------------------------------------------------------------------------

PAUSE_CONJUNCTIONS: frozenset[str] = frozenset({
    # English
    "and", "but", "or", "because",
    # Hindi
    "और", "लेकिन", "या", "क्योंकि",
    # Bengali
    "এবং", "কিন্তু", "আর",
    # Tamil
    "மற்றும்", "ஆனால்",
    # Telugu
    "మరియు", "కానీ",
    # Marathi
    "आणि", "पण",
    # Gujarati
    "અને", "પણ",
})
