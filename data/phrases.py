"""
Cipher Phrase Bank
Curated phrases with crossword-style hints, bucketed by difficulty.

- easy: longer phrases with many repeated letters (more context)
- medium: moderate length and letter diversity
- hard: short phrases with high letter diversity
"""

PHRASES = {
    'easy': [
        ("I AM SO HAPPY TO BE HERE WITH YOU", "Warm greeting"),
        ("THE CAT SAT ON THE BIG RED MAT", "Feline resting place"),
        ("WE CAN GO TO THE PARK AND PLAY", "Outdoor activity"),
        ("IT IS A NICE DAY TO BE OUTSIDE", "Weather appreciation"),
        ("SHE HAS A PET DOG AND A CAT TOO", "Multiple pets"),
        ("HE RAN SO FAR AND DID NOT STOP", "Endurance running"),
        ("THE SUN IS UP AND THE SKY IS BLUE", "Morning observation"),
        ("I LIKE TO EAT PIE AND ICE CREAM", "Dessert preference"),
        ("WE HAD SO MUCH FUN AT THE FAIR", "Event enjoyment"),
        ("THE BOY AND GIRL WENT TO SCHOOL", "Student transportation"),
        ("MY MOM AND DAD ARE THE BEST", "Parent appreciation"),
        ("LET US GO OUT AND SEE THE STARS", "Nighttime activity"),
        ("THE OLD OWL SAT IN THE BIG TREE", "Bird location"),
        ("I CAN DO IT IF I TRY MY BEST", "Self motivation"),
        ("THE FOX RAN BY THE HEN HOUSE", "Farm scene"),
        ("WE SAW A BIG SHIP ON THE SEA", "Nautical sighting"),
        ("IT IS NOT TOO HOT OR TOO COLD", "Perfect temperature"),
        ("THE DOG BIT THE TOY AND RAN OFF", "Pet play"),
        ("SHE GOT A NEW HAT FOR THE PARTY", "Accessory acquisition"),
        ("HE IS MY PAL AND WE HAVE FUN", "Friendship description"),
        ("THE BUS CAME AND WE GOT ON IT", "Public transport"),
        ("I ATE ALL OF THE CAKE AND PIE", "Dessert consumption"),
        ("WE MET A NICE MAN AT THE STORE", "Shop encounter"),
        ("THE SKY WAS SO DARK AND IT RAINED", "Storm description"),
        ("MY DAD CAN FIX THE CAR FOR US", "Paternal skill"),
        ("GO TO BED AND GET SOME REST NOW", "Sleep command"),
        ("THE BAT FLEW UP INTO THE NIGHT", "Nocturnal animal"),
        ("I AM NOT MAD BUT I AM A BIT SAD", "Mixed emotions"),
        ("SHE IS SO SHY BUT ALSO VERY KIND", "Personality traits"),
        ("WE RAN AND RAN UNTIL WE GOT HOME", "Running home"),
        ("THE OWL CAN FLY HIGH IN THE SKY", "Bird ability"),
        ("I SEE YOU AND YOU SEE ME TOO", "Mutual observation"),
        ("HE HAS A NEW TOY CAR TO PLAY WITH", "Gift reception"),
        ("THE FISH SWAM IN THE BLUE POND", "Aquatic scene"),
        ("I AM IN MY BED AND I FEEL COZY", "Comfortable state"),
        ("WE DID IT ALL AND HAD A GREAT TIME", "Full completion"),
        ("THE RED BUS DROVE DOWN THE ROAD", "Vehicle travel"),
        ("SHE SET THE BOX ON THE BIG TABLE", "Placement action"),
        ("LET US EAT AND THEN GO TO SLEEP", "Evening routine"),
        ("THE MAN AND HIS DOG TOOK A WALK", "Walking together"),
    ],
    'medium': [
        ("THE EARLY BIRD CATCHES THE WORM", "Morning advantage proverb"),
        ("ACTIONS SPEAK LOUDER THAN WORDS", "Deeds over declarations"),
        ("ALL GOOD THINGS MUST COME TO AN END", "Nothing lasts forever"),
        ("EVERY CLOUD HAS A SILVER LINING", "Optimistic outlook on setbacks"),
        ("A PICTURE IS WORTH A THOUSAND WORDS", "Visual communication power"),
        ("THERE IS NO PLACE LIKE HOME", "Dorothy's famous line"),
        ("WHERE THERE IS A WILL THERE IS A WAY", "Determination finds solutions"),
        ("WHAT GOES AROUND COMES AROUND", "Karma in brief"),
        ("LAUGHTER IS THE BEST MEDICINE", "Humor heals"),
        ("THE TRUTH SHALL SET YOU FREE", "Honesty liberates"),
        ("SLOW AND STEADY WINS THE RACE", "Tortoise's strategy"),
        ("TOO MANY COOKS SPOIL THE BROTH", "Excess help hinders"),
        ("PRACTICE MAKES PERFECT", "Repetition breeds mastery"),
        ("BETTER SAFE THAN SORRY", "Caution prevents regret"),
        ("BIRDS OF A FEATHER FLOCK TOGETHER", "Similar people associate"),
        ("THE NIGHT IS ALWAYS DARKEST BEFORE THE DAWN", "Hope follows despair"),
        ("BE THE CHANGE YOU WISH TO SEE", "Gandhi's call to action"),
        ("BELIEVE YOU CAN AND YOU ARE HALFWAY THERE", "Roosevelt on confidence"),
        ("TURN YOUR WOUNDS INTO WISDOM", "Oprah on growth from pain"),
        ("THE SECRET OF GETTING AHEAD IS GETTING STARTED", "Mark Twain on progress"),
        ("IMAGINATION IS MORE IMPORTANT THAN KNOWLEDGE", "Einstein on creativity"),
        ("DO WHAT YOU CAN WITH ALL YOU HAVE", "Roosevelt on resourcefulness"),
        ("A JOURNEY OF A THOUSAND MILES BEGINS WITH A SINGLE STEP", "Lao Tzu on starting"),
        ("HAPPINESS IS NOT A DESTINATION IT IS A WAY OF LIFE", "Life philosophy"),
        ("THE ONLY WAY TO DO GREAT WORK IS TO LOVE WHAT YOU DO", "Jobs on passion"),
        ("IN THE MIDDLE OF DIFFICULTY LIES OPPORTUNITY", "Einstein on challenges"),
        ("LIFE IS WHAT HAPPENS WHEN YOU ARE BUSY MAKING PLANS", "Lennon on spontaneity"),
        ("NOT ALL WHO WANDER ARE LOST", "Tolkien on exploration"),
        ("THE ONLY THING WE HAVE TO FEAR IS FEAR ITSELF", "FDR's reassurance"),
        ("TO BE OR NOT TO BE THAT IS THE QUESTION", "Hamlet's contemplation"),
        ("IT IS NOT THE YEARS IN YOUR LIFE BUT THE LIFE IN YOUR YEARS", "Lincoln on living fully"),
    ],
    'hard': [
        ("KNOWLEDGE IS POWER", "Bacon's famous quote"),
        ("FORTUNE FAVORS THE BOLD", "Latin proverb on courage"),
        ("TIME HEALS ALL WOUNDS", "Recovery takes patience"),
        ("HONESTY IS THE BEST POLICY", "Virtue in truthfulness"),
        ("CURIOSITY KILLED THE CAT", "Warning against nosiness"),
        ("ABSENCE MAKES THE HEART GROW FONDER", "Distance deepens love"),
        ("A STITCH IN TIME SAVES NINE", "Early fixes prevent bigger problems"),
        ("BEAUTY IS IN THE EYE OF THE BEHOLDER", "Subjective aesthetics"),
        ("ROME WAS NOT BUILT IN A DAY", "Great things take time"),
        ("TWO HEADS ARE BETTER THAN ONE", "Collaboration benefits"),
        ("STRIKE WHILE THE IRON IS HOT", "Seize the moment"),
        ("THE PEN IS MIGHTIER THAN THE SWORD", "Writing over warfare"),
        ("LOOK BEFORE YOU LEAP", "Think before acting"),
        ("THE SQUEAKY WHEEL GETS THE GREASE", "Complaints get attention"),
        ("YOU REAP WHAT YOU SOW", "Consequences follow actions"),
        ("A FRIEND IN NEED IS A FRIEND INDEED", "True friendship tested by hardship"),
        ("NECESSITY IS THE MOTHER OF INVENTION", "Need drives creativity"),
        ("A PENNY SAVED IS A PENNY EARNED", "Franklin on frugality"),
        ("ALL THAT GLITTERS IS NOT GOLD", "Appearances deceive"),
        ("GREAT MINDS THINK ALIKE", "Similar conclusions from smart people"),
        ("TIME AND TIDE WAIT FOR NO MAN", "Unstoppable forces"),
        ("THE BEST THINGS IN LIFE ARE FREE", "Value beyond money"),
        ("WHEN IN ROME DO AS THE ROMANS DO", "Adapt to local customs"),
        ("VARIETY IS THE SPICE OF LIFE", "Diversity enriches existence"),
        ("BLOOD IS THICKER THAN WATER", "Family bonds strongest"),
        ("CARPE DIEM SEIZE THE DAY", "Latin life philosophy"),
        ("EVERY DOG HAS ITS DAY", "Everyone gets their turn"),
        ("EASY COME EASY GO", "Quick gains, quick losses"),
        ("FIRST IMPRESSIONS LAST", "Initial encounters matter"),
        ("IF THE SHOE FITS WEAR IT", "Accept fitting criticism"),
        ("LET BYGONES BE BYGONES", "Forget past wrongs"),
        ("MIND YOUR OWN BUSINESS", "Stay in your lane"),
        ("NO PAIN NO GAIN", "Effort brings reward"),
        ("OUT OF SIGHT OUT OF MIND", "Forgotten when absent"),
        ("PATIENCE IS A VIRTUE", "Waiting well rewarded"),
        ("SILENCE IS GOLDEN", "Quiet has value"),
        ("THE APPLE NEVER FALLS FAR FROM THE TREE", "Kids resemble parents"),
        ("THE GRASS IS ALWAYS GREENER", "Envying others situations"),
        ("THINK OUTSIDE THE BOX", "Creative problem solving"),
        ("WALLS HAVE EARS", "Someone might overhear"),
    ],
}
