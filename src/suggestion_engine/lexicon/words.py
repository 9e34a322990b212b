"""Built-in word sets. All entries are lowercase."""

from __future__ import annotations

BASIC_WORDS = frozenset(
    """
    a an the and or but nor so yet if then than because while although though
    unless until since whether as at by for from in into of off on onto out over
    to up upon with within without about above across after against along among
    around before behind below beneath beside besides between beyond down during
    except inside near outside past through throughout toward towards under
    underneath via

    i me my mine myself you your yours yourself yourselves he him his himself
    she her hers herself it its itself we us our ours ourselves they them their
    theirs themselves this that these those who whom whose which what whatever
    whoever where when why how there here

    be am is are was were been being have has had having do does did doing done
    will would shall should may might must can could ought

    get gets got getting gotten go goes went going gone make makes made making
    take takes took taking taken come comes came coming see sees saw seeing seen
    know knows knew knowing known think thinks thought thinking say says said
    saying tell tells told telling give gives gave giving given find finds found
    finding work works worked working call calls called calling try tries tried
    trying ask asks asked asking need needs needed needing feel feels felt feeling
    become becomes became becoming leave leaves left leaving put puts putting
    seem seems seemed seeming keep keeps kept keeping let lets letting begin
    begins began begun beginning help helps helped helping show shows showed
    shown showing hear hears heard hearing play plays played playing run runs
    ran running move moves moved moving live lives lived living believe believes
    believed believing bring brings brought bringing happen happens happened
    happening write writes wrote written writing sit sits sat sitting stand
    stands stood standing lose loses lost losing pay pays paid paying meet meets
    met meeting include includes included including continue continues continued
    continuing set sets setting learn learns learned learning change changes
    changed changing lead leads led leading understand understands understood
    understanding watch watches watched watching follow follows followed
    following stop stops stopped stopping create creates created creating speak
    speaks spoke spoken speaking read reads reading open opens opened opening
    close closes closed closing consider considers considered considering appear
    appears appeared appearing buy buys bought buying wait waits waited waiting
    serve serves served serving die dies died dying send sends sent sending
    expect expects expected expecting build builds built building stay stays
    stayed staying fall falls fell fallen falling cut cuts cutting reach reaches
    reached reaching kill kills killed killing remain remains remained remaining
    want wants wanted wanting use uses used using look looks looked looking like
    likes liked liking love loves loved loving walk walks walked walking talk
    talks talked talking turn turns turned turning start starts started starting
    add adds added adding allow allows allowed allowing spend spends spent
    spending grow grows grew grown growing win wins won winning offer offers
    offered offering remember remembers remembered remembering receive receives
    received receiving suggest suggests suggested suggesting raise raises raised
    raising pass passes passed passing sell sells sold selling require requires
    required requiring report reports reported reporting decide decides decided
    deciding pull pulls pulled pulling push pushes pushed pushing carry carries
    carried carrying break breaks broke broken breaking hold holds held holding
    eat eats ate eaten eating drink drinks drank drinking sleep sleeps slept
    sleeping drive drives drove driven driving ride rides rode ridden riding
    wear wears wore worn wearing teach teaches taught teaching catch catches
    caught catching draw draws drew drawn drawing choose chooses chose chosen
    choosing fly flies flew flown flying forget forgets forgot forgotten
    forgetting forgive forgave forgiven hope hopes hoped hoping plan plans
    planned planning visit visits visited visiting enjoy enjoys enjoyed enjoying
    finish finishes finished finishing explain explains explained explaining
    agree agrees agreed agreeing answer answers answered answering check checks
    checked checking clean cleans cleaned cleaning cook cooks cooked cooking
    dance danced dancing fill filled fix fixed fixing jump jumped laugh laughed
    laughing listen listens listened listening miss missed missing need notice
    noticed order ordered pick picked picking prefer preferred prepare prepared
    promise promised rain rained share shared shop shopped shopping smile smiled
    study studies studied studying travel traveled travelling traveling wash
    washed wish wished wonder wondered worry worried worrying describe described
    develop developed developing provide provided providing support supported
    manage managed improve improved improving reduce reduced increase increased
    produce produced protect protected return returned returning save saved
    solve solved test tested testing accept accepted accepting apply applied
    applying argue argued attend attended avoid avoided compare compared
    complete completed contain contains contained cover covered depend depends
    design designed discuss discussed enter entered exist exists existed imagine
    imagined join joined mention mentioned prove proved realize realized
    recommend recommended refer referred relate related remove removed replace
    replaced represent represents represented respond responded review reviewed
    search searched select selected serve shout shouted sign signed sing sang
    sung singing smell swim swam swimming throw threw thrown throwing touch
    touched train trained treat treated vote voted warn warned

    time times year years people way ways day days man men woman women child
    children world life lives hand hands part parts place places case cases
    week weeks company companies system systems program programs question
    questions government number numbers night nights point points home homes
    water room rooms mother fathers father area areas money story stories fact
    facts month months lot lots right study book books eye eyes job jobs word
    words business issue issues side sides kind kinds head heads house houses
    service services friend friends power hour hours game games line lines end
    ends member members law laws car cars city cities community name names
    president team teams minute minutes idea ideas kid kids body bodies
    information back parent parents face faces others level levels office
    offices door doors health person persons art war history party result
    results morning mornings reason reasons research girl girls guy guys moment
    moments air teacher teachers force education foot feet boy boys age policy
    process music market sense nation plan college interest death experience
    effect class control care field development role effort rate heart drug
    leader light voice wife husband police mind difference period value building
    action authority model paper data school schools student students state
    states country countries problem problems family families group groups
    example examples student street streets food dog dogs cat cats bird birds
    tree trees sun moon star stars sky road roads river rivers sea ocean island
    mountain mountains town towns village table tables chair chairs bed window
    windows floor wall walls garden phone computer letter letters email emails
    message messages report reports meeting meetings project projects plan plans
    test tests exam exams grade grades lesson lessons page pages chapter
    chapters sentence sentences paragraph paragraphs essay essays text texts
    language languages grammar spelling style writing writer writers reader
    readers brother brothers sister sisters son sons daughter daughters baby
    uncle aunt cousin grandmother grandfather doctor doctors nurse lawyer
    manager engineer artist worker workers customer customers client clients
    price prices cost costs job work weekend holiday vacation trip trips ticket
    tickets bus train plane ship boat bike bag box boxes cup glass bottle
    coffee tea milk bread cake apple apples orange oranges banana fruit egg eggs
    meat fish chicken rice soup dinner lunch breakfast meal meals kitchen
    bathroom restroom shower clothes shirt shoes hat coat dress color colors
    picture pictures photo photos movie movies film song songs show shows
    news newspaper magazine radio television internet website question answer
    answers choice choices chance chances change changes rule rules reason
    purpose goal goals success failure mistake mistakes error errors problem
    solution solutions method methods approach theory analysis evidence argument
    arguments topic topics subject subjects opinion opinions perspective view
    views matter matters nature science sciences math history culture society
    economy industry technology energy environment weather season seasons
    spring summer autumn winter hospital church library museum park store
    stores restaurant hotel airport station bank university universities
    package address schedule

    good better best bad worse worst great big bigger biggest small smaller
    smallest large larger largest little long longer longest short shorter high
    higher low lower old older oldest new newer newest young younger first last
    next early earlier late later important different same own other another
    such only just also even still already always never often sometimes usually
    rarely ever again very really quite rather too enough almost nearly about
    much many more most less least few fewer several each every all both either
    neither none some any no not nothing something anything everything nobody
    somebody anybody everybody someone anyone everyone nowhere somewhere
    anywhere everywhere today tomorrow yesterday tonight now soon ago once twice
    free full empty easy hard difficult simple clear possible impossible real
    true false sure certain able unable ready happy sad angry tired hungry sick
    well fine nice kind beautiful pretty ugly clean dirty hot cold warm cool
    fast slow quick quickly slowly strong weak rich poor cheap expensive safe
    dangerous quiet loud dark bright heavy light open close near far wide deep
    main major minor public private local national international social
    political economic personal general special particular common whole human
    natural final recent current available likely necessary similar various
    certain serious significant successful popular entire huge tiny modern
    famous formal informal perfect excellent interesting boring funny strange
    weird wrong correct favorite usual unusual obvious friendly helpful careful
    careless useful useless honest polite rude lucky busy late grateful
    independent different separate definitely probably perhaps maybe actually
    finally certainly exactly especially simply clearly however therefore
    instead otherwise meanwhile furthermore moreover although despite indeed
    together alone away back forward home abroad inside outside upstairs
    downstairs yes okay hello hi hey goodbye please thanks thank sorry

    one two three four five six seven eight nine ten eleven twelve thirteen
    fourteen fifteen sixteen seventeen eighteen nineteen twenty thirty forty
    fifty sixty seventy eighty ninety hundred thousand million billion second
    third fourth fifth half dozen
    """.split()
)

EXTENDED_WORDS = frozenset(
    """
    accommodate achieve achieved achievement acknowledgment acquire across
    address adequate advantage advice affect afraid agreement although amount
    analysis apparent appearance approach appropriate argument arrange arrive
    article aspect assume attempt attention attitude audience author average
    aware balance basic basis beautiful because beginning behavior benefit
    calendar career category cause center century challenge character chief
    citizen collect committee communication comparison competition concern
    conclusion condition conference confidence consequence consider constant
    context contract contribute conversation create credit crisis criticism
    decision definitely degree demand department describe detail determine
    develop development device direction director discover discussion disease
    distance economy effective efficient element embarrass emotion employee
    encourage engine enough environment equal equipment especially essential
    establish estimate event eventually evidence exactly examine excellent
    exercise existence experience experiment expert explain explanation express
    extra facility factor familiar feature figure finance foreign forty forward
    foundation frequent friend function fund future generation government
    grammar grateful guarantee guess habit happened height identify image
    immediately impact improve improvement incident independent indicate
    individual influence initial instance institution instruction intelligence
    intention interested interesting introduce investment involve judgment
    knowledge leadership length library limit literature maintain maintenance
    management material measure medium memory method misspell mistake moment
    necessary negative network neighbor normal novel object occasion occur
    occurred occurrence official operation opportunity option ordinary
    organization original outcome participate particular partner pattern
    perform performance perhaps period permanent persistent personality
    phenomenon physical position positive potential practice prefer presence
    pressure previous primary principle priority privilege procedure product
    profession professional progress property proportion proposal prospect
    psychology purpose quality quantity question receive recognize recommend
    reference region regular relationship relevant religion remember require
    resistance resource response responsibility restaurant schedule section
    secure separate sequence session shape signal significant situation skill
    society source specific standard statement strategy structure success
    sufficient suggestion summary surface survey technique temperature tendency
    tomorrow tradition transfer truth typical understanding unique until
    variety version weird whether writing useful
    visible regardless supposedly anyway okay
    """.split()
)

PROPER_NOUNS = frozenset(
    """
    america american europe european asia asian africa african australia canada
    china chinese england english britain british france french germany german
    india indian italy italian japan japanese mexico spain spanish russia
    london paris berlin tokyo york washington california texas google microsoft
    apple amazon christmas easter internet
    """.split()
)

ACRONYMS = frozenset(
    """
    usa uk eu un nasa fbi cia ceo cfo cto hr it ai pdf html css api url faq
    asap diy etc tv ok
    """.split()
)

CALENDAR_TERMS = frozenset(
    """
    monday tuesday wednesday thursday friday saturday sunday january february
    march april may june july august september october november december
    """.split()
)
